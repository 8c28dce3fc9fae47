"""
Number constraint implementation.
"""

from decimal import Decimal, localcontext
from typing import Any

from .base import TypeConstraint, ValidationContext
from ..api import ErrorCode
from ..schema_node import Number, SchemaNode
from ..utils import SchemaKeywords, TypeUtils


def is_multiple_of(value: Number, multiple_of: Number) -> bool:
    """
    Check that value / multiple_of is an integer.

    Both numbers are converted to decimals through their shortest repr, so
    0.3 is a multiple of 0.1 even though the float division is inexact.
    """
    dividend = Decimal(repr(value))
    divisor = Decimal(repr(multiple_of))
    if not dividend.is_finite():
        return False

    with localcontext() as ctx:
        # Room for every digit of the integer quotient
        ctx.prec = max(ctx.prec, dividend.adjusted() - divisor.adjusted() + 10)
        return dividend % divisor == 0


class NumberConstraint(TypeConstraint):
    """
    Constraint for the numeric keywords of a schema.
    """

    def accepts(self, value: Any) -> bool:
        return TypeUtils.is_number(value)

    def _validate_type_specific(self, node: SchemaNode, value: Any,
                                context: ValidationContext) -> bool:
        """
        Validate number-specific keywords.

        Args:
            node: Compiled schema node
            value: The number to validate (guaranteed to be a number)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True

        # Check minimum
        if node.minimum is not None and value < node.minimum:
            context.add_error(
                ErrorCode.NUMBER_TOO_SMALL,
                f"Value {value} must be greater than or equal to {node.minimum}",
                node, SchemaKeywords.MINIMUM, value
            )
            valid = False

        if node.exclusive_minimum is not None and value <= node.exclusive_minimum:
            context.add_error(
                ErrorCode.NUMBER_TOO_SMALL,
                f"Value {value} must be greater than {node.exclusive_minimum}",
                node, SchemaKeywords.EXCLUSIVE_MINIMUM, value
            )
            valid = False

        # Check maximum
        if node.maximum is not None and value > node.maximum:
            context.add_error(
                ErrorCode.NUMBER_TOO_LARGE,
                f"Value {value} must be less than or equal to {node.maximum}",
                node, SchemaKeywords.MAXIMUM, value
            )
            valid = False

        if node.exclusive_maximum is not None and value >= node.exclusive_maximum:
            context.add_error(
                ErrorCode.NUMBER_TOO_LARGE,
                f"Value {value} must be less than {node.exclusive_maximum}",
                node, SchemaKeywords.EXCLUSIVE_MAXIMUM, value
            )
            valid = False

        # Check multiple_of
        if node.multiple_of is not None and not is_multiple_of(value, node.multiple_of):
            context.add_error(
                ErrorCode.NUMBER_NOT_MULTIPLE,
                f"Value {value} is not a multiple of {node.multiple_of}",
                node, SchemaKeywords.MULTIPLE_OF, value
            )
            valid = False

        return valid
