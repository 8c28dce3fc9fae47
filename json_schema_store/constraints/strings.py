"""
String constraint implementation.
"""

from typing import Any

from .base import TypeConstraint, ValidationContext
from ..api import ErrorCode
from ..schema_node import SchemaNode
from ..utils import SchemaKeywords


class StringConstraint(TypeConstraint):
    """
    Constraint for the length keywords of a schema.

    Lengths are counted in code points.
    """

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)

    def _validate_type_specific(self, node: SchemaNode, value: Any,
                                context: ValidationContext) -> bool:
        valid = True

        if node.min_length is not None and len(value) < node.min_length:
            context.add_error(
                ErrorCode.STRING_TOO_SHORT,
                f"String length {len(value)} is less than minimum {node.min_length}",
                node, SchemaKeywords.MIN_LENGTH, value
            )
            valid = False

        if node.max_length is not None and len(value) > node.max_length:
            context.add_error(
                ErrorCode.STRING_TOO_LONG,
                f"String length {len(value)} is greater than maximum {node.max_length}",
                node, SchemaKeywords.MAX_LENGTH, value
            )
            valid = False

        return valid
