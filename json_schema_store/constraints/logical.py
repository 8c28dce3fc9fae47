"""
Logical constraint implementations.
"""

from typing import Any, List

from .base import Constraint, ValidationContext
from ..api import ErrorCode, ValidationError
from ..schema_node import SchemaNode
from ..utils import SchemaKeywords


class AllOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy all sub-schemas.

    Errors of every branch are reported directly.
    """

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        if node.all_of is None:
            return True

        valid = True
        for location in node.all_of:
            if not context.check(location, value):
                valid = False
        return valid


class AnyOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy at least one sub-schema.
    """

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        """
        Validate a value against the anyOf branches of a node.

        Each branch is checked in an isolated context. If no branch passes,
        a single error is reported; the branch errors are attached to it
        as causes and never reach the enclosing context.

        Args:
            node: Compiled schema node
            value: Value to validate
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        if node.any_of is None:
            return True

        # Track all sub-schema errors
        all_errors: List[ValidationError] = []

        for location in node.any_of:
            sub_context = context.isolated()
            sub_context.check(location, value)
            if not sub_context.errors:
                return True  # At least one branch passed
            all_errors.extend(sub_context.errors)

        # If we got here, no branch matched
        context.add_error(
            ErrorCode.ANY_OF_NO_MATCH,
            "Value does not match any of the anyOf schemas",
            node, SchemaKeywords.ANY_OF, value,
            causes=all_errors
        )
        return False


class OneOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy exactly one sub-schema.
    """

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        if node.one_of is None:
            return True

        passed = 0
        failed_errors: List[ValidationError] = []

        # Every branch is checked so the number of matches is exact
        for location in node.one_of:
            sub_context = context.isolated()
            sub_context.check(location, value)
            if sub_context.errors:
                failed_errors.extend(sub_context.errors)
            else:
                passed += 1

        if passed == 1:
            return True

        if passed == 0:
            context.add_error(
                ErrorCode.ONE_OF_NO_MATCH,
                f"{passed} oneOf schemas passed, expected exactly 1",
                node, SchemaKeywords.ONE_OF, value,
                causes=failed_errors
            )
        else:
            context.add_error(
                ErrorCode.ONE_OF_MULTIPLE_MATCHES,
                f"{passed} oneOf schemas passed, expected exactly 1",
                node, SchemaKeywords.ONE_OF, value
            )
        return False
