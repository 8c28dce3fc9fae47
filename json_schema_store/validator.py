"""
Validator walking compiled schema nodes against JSON instances.
"""

from typing import Any, List, Optional, Union

from .api import ValidationResult
from .constraints import (
    AllOfConstraint,
    AnyOfConstraint,
    ArrayConstraint,
    Constraint,
    ErrorSink,
    ExplicitTypeConstraint,
    FalseSchemaConstraint,
    NumberConstraint,
    ObjectConstraint,
    OneOfConstraint,
    StringConstraint,
    ValidationContext,
)
from .locations import LocationLike
from .schema_node import SchemaNode


class Validator:
    """
    Validates data against schemas built by a schema store.

    Every constraint of a node is checked, whatever the outcome of the
    others, so a single call reports every problem with an instance.
    Only anyOf and oneOf branches are checked in isolation.
    """

    def __init__(self, store, verbose: bool = False):
        """
        Initialize a new validator.

        Args:
            store: Schema store holding the built schemas
            verbose: Whether to include offending values in error messages
        """
        self.store = store
        self.verbose = verbose
        self.constraints: List[Constraint] = [
            FalseSchemaConstraint(),
            NumberConstraint(),
            StringConstraint(),
            ObjectConstraint(),
            ArrayConstraint(),
            ExplicitTypeConstraint(),
            AllOfConstraint(),
            AnyOfConstraint(),
            OneOfConstraint(),
        ]

    def validate(self, schema: Union[SchemaNode, LocationLike], data: Any,
                 error_sink: Optional[ErrorSink] = None) -> ValidationResult:
        """
        Validate data against a built schema.

        Args:
            schema: A built node, or the location of one
            data: Data to validate
            error_sink: Optional callable receiving each error once

        Returns:
            ValidationResult containing validation status and errors

        Raises:
            SchemaNotBuiltError: If the schema, or a sub-schema reached while
                validating, has not been built
        """
        node = schema if isinstance(schema, SchemaNode) else self.store.get(schema)
        context = ValidationContext(self, verbose=self.verbose, sink=error_sink)

        self.validate_node(node, data, context)

        return ValidationResult(
            valid=not context.errors,
            errors=context.errors
        )

    def validate_node(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        """
        Check a value against every constraint of a node.

        Args:
            node: Compiled schema node
            value: Value to validate
            context: Validation context receiving the errors

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True
        for constraint in self.constraints:
            if not constraint.validate(node, value, context):
                valid = False
        return valid

    def validate_location(self, location: LocationLike, value: Any,
                          context: ValidationContext) -> bool:
        return self.validate_node(self.store.get(location), value, context)
