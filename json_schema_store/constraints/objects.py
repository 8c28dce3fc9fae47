"""
Object constraint implementation.
"""

from typing import Any, List

from .base import TypeConstraint, ValidationContext
from ..api import ErrorCode
from ..schema_node import SchemaNode
from ..utils import SchemaKeywords


class ObjectConstraint(TypeConstraint):
    """
    Constraint for the object keywords of a schema: properties,
    patternProperties, additionalProperties and required.
    """

    def accepts(self, value: Any) -> bool:
        return isinstance(value, dict)

    def _validate_type_specific(self, node: SchemaNode, value: Any,
                                context: ValidationContext) -> bool:
        """
        Validate object-specific keywords.

        A property is checked against its literal schema and, independently,
        against every pattern schema whose pattern matches its name. Only the
        properties matched by neither are checked against
        additionalProperties, and only when that keyword is present.

        Args:
            node: Compiled schema node
            value: The object to validate (guaranteed to be an object)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True

        # Properties not covered by properties or patternProperties
        remaining: List[str] = []

        for prop, prop_value in value.items():
            matched = False
            with context.with_path(prop):
                if prop in node.properties:
                    matched = True
                    if not context.check(node.properties[prop], prop_value):
                        valid = False

                for pattern, location in node.pattern_properties:
                    if pattern.search(prop):
                        matched = True
                        if not context.check(location, prop_value):
                            valid = False

            if not matched:
                remaining.append(prop)

        if node.additional_properties is not None:
            for prop in remaining:
                with context.with_path(prop):
                    if not context.check(node.additional_properties, value[prop]):
                        valid = False

        for prop in node.required:
            if prop not in value:
                context.add_error(
                    ErrorCode.REQUIRED_PROPERTY_MISSING,
                    f"Missing required property '{prop}'",
                    node, SchemaKeywords.REQUIRED, value
                )
                valid = False

        return valid
