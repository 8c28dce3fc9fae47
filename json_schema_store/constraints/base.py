"""
Base constraint classes for the JSON Schema validator.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from ..api import ErrorCode, ValidationError
from ..locations import Location
from ..schema_node import SchemaNode
from ..utils import JsonPointer

ErrorSink = Callable[[ValidationError], None]


class ValidationContext:
    """
    Context for validation operations.

    This class maintains state during the validation process: the current
    instance path and the errors reported so far. Errors are also forwarded
    to an optional sink as soon as they are reported.
    """

    def __init__(self, validator, verbose: bool = False, sink: Optional[ErrorSink] = None):
        """
        Initialize a new validation context.

        Args:
            validator: Validator used to descend into sub-schemas
            verbose: Whether to include offending values in error messages
            sink: Callable receiving each error once
        """
        self.validator = validator
        self.verbose = verbose
        self.sink = sink
        self.errors: List[ValidationError] = []
        self.path_parts: List[str] = []

    @property
    def path(self) -> str:
        """
        Get the current JSON Pointer path.

        Returns:
            JSON Pointer string for the current path
        """
        return JsonPointer.from_parts(self.path_parts)

    def push_path(self, part: Any) -> None:
        """
        Push a path part onto the current path.

        Args:
            part: Path segment to add
        """
        self.path_parts.append(str(part))

    def pop_path(self) -> None:
        """Remove the last path part from the current path."""
        if self.path_parts:
            self.path_parts.pop()

    def with_path(self, part: Any):
        """
        Context manager for adding a path part temporarily.

        Args:
            part: Path segment to add

        Returns:
            Context manager
        """
        return PathContext(self, part)

    def add_error(self,
                  code: ErrorCode,
                  message: str,
                  node: SchemaNode,
                  keyword: Optional[str],
                  value: Any,
                  causes: Optional[List[ValidationError]] = None) -> None:
        """
        Report a validation error.

        Args:
            code: Error code
            message: Error message
            node: Schema node whose keyword was violated
            keyword: The violated keyword
            value: Value that failed validation
            causes: Errors of failed combinator branches
        """
        if self.verbose:
            message = f"{message} (value: {value!r})"

        error = ValidationError(
            code=code,
            path=self.path,
            message=message,
            schema_path=str(node.location),
            keyword=keyword,
            value=value,
            causes=list(causes or [])
        )
        self.errors.append(error)
        if self.sink is not None:
            self.sink(error)

    def isolated(self) -> "ValidationContext":
        """
        Create a context whose errors do not reach this one.

        Returns:
            A context at the same path with its own error list and no sink
        """
        sub_context = ValidationContext(self.validator, verbose=self.verbose)
        sub_context.path_parts = self.path_parts.copy()
        return sub_context

    def check(self, location: Location, value: Any) -> bool:
        """
        Validate a value against the schema built at a location.

        Args:
            location: Location of a built schema
            value: Value to validate

        Returns:
            True if validation succeeds, False otherwise
        """
        return self.validator.validate_location(location, value, self)

    def __str__(self) -> str:
        """String representation of the validation context."""
        return f"ValidationContext(path={self.path}, errors={len(self.errors)})"


class PathContext:
    """Context manager for temporarily adding a path part."""

    def __init__(self, context: ValidationContext, part: Any):
        """
        Initialize a new path context.

        Args:
            context: Validation context
            part: Path segment to add
        """
        self.context = context
        self.part = part

    def __enter__(self):
        """Add the path part when entering the context."""
        self.context.push_path(self.part)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Remove the path part when exiting the context."""
        self.context.pop_path()


class Constraint(ABC):
    """
    Base class for all schema constraints.

    A constraint checks one group of keywords of a schema node. Constraints
    are stateless; the node carries the keyword values.
    """

    @abstractmethod
    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        """
        Validate a value against this constraint's keywords of a node.

        Args:
            node: Compiled schema node
            value: Value to validate
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        pass

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"{self.__class__.__name__}"

    def __repr__(self) -> str:
        """Detailed representation of the constraint."""
        return self.__str__()


class TypeConstraint(Constraint, ABC):
    """
    Base class for type-specific constraints.

    Type constraints only look at values of their own JSON type; values of
    any other type pass untouched.
    """

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """
        Check whether the value is of the type this constraint handles.

        Args:
            value: Value to check

        Returns:
            True if the type-specific keywords apply to the value
        """
        pass

    def validate(self, node: SchemaNode, value: Any, context: ValidationContext) -> bool:
        if not self.accepts(value):
            return True
        return self._validate_type_specific(node, value, context)

    @abstractmethod
    def _validate_type_specific(self, node: SchemaNode, value: Any,
                                context: ValidationContext) -> bool:
        """
        Validate type-specific keywords.

        Args:
            node: Compiled schema node
            value: Value to validate (guaranteed to be of the handled type)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        pass
