"""
Type constraint implementation.
"""

from typing import Any

from .base import Constraint, ValidationContext
from ..api import ErrorCode
from ..schema_node import SchemaNode
from ..utils import SchemaKeywords, TypeUtils


class ExplicitTypeConstraint(Constraint):
    """
    Constraint that validates a value's type against the `type` keyword.

    Each listed type name is an independent assertion: the value gets one
    error for every name it does not satisfy.
    """

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        valid = True

        # Sorted for a stable error order
        for schema_type in sorted(node.explicit_types):
            if TypeUtils.matches_type(value, schema_type):
                continue

            context.add_error(
                ErrorCode.TYPE_ERROR,
                f"Expected {schema_type}, got {TypeUtils.get_json_type(value)}",
                node, SchemaKeywords.TYPE, value
            )
            valid = False

        return valid


class FalseSchemaConstraint(Constraint):
    """
    Constraint of the boolean schema `false`, which no value satisfies.
    """

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        if not node.reject_all:
            return True

        context.add_error(
            ErrorCode.FALSE_SCHEMA,
            "No value is allowed here",
            node, None, value
        )
        return False
