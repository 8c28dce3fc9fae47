"""
Array constraint implementation.
"""

from typing import Any

from .base import TypeConstraint, ValidationContext
from ..locations import Location
from ..schema_node import SchemaNode


class ArrayConstraint(TypeConstraint):
    """
    Constraint for the `items` keyword of a schema.
    """

    def accepts(self, value: Any) -> bool:
        return isinstance(value, list)

    def _validate_type_specific(self, node: SchemaNode, value: Any,
                                context: ValidationContext) -> bool:
        """
        Validate array items.

        A single items schema applies to every element. A list of schemas is
        positional; elements past the end of the list are not checked.
        """
        if node.items is None:
            return True

        if isinstance(node.items, Location):
            schemas = [node.items] * len(value)
        else:
            schemas = list(node.items)

        valid = True
        for i, (location, item) in enumerate(zip(schemas, value)):
            with context.with_path(i):
                if not context.check(location, item):
                    valid = False

        return valid
