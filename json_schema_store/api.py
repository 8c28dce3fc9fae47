"""
Public API for the JSON Schema store and validator.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Union


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    TYPE_ERROR = auto()
    REQUIRED_PROPERTY_MISSING = auto()
    STRING_TOO_SHORT = auto()
    STRING_TOO_LONG = auto()
    NUMBER_TOO_SMALL = auto()
    NUMBER_TOO_LARGE = auto()
    NUMBER_NOT_MULTIPLE = auto()
    ONE_OF_NO_MATCH = auto()
    ONE_OF_MULTIPLE_MATCHES = auto()
    ANY_OF_NO_MATCH = auto()
    FALSE_SCHEMA = auto()


@dataclass
class ValidationError:
    """
    Represents a validation error with structured information.

    Attributes:
        code: The error code identifying the type of error
        path: JSON Pointer to the value that failed validation
        message: Human-readable error message
        schema_path: Location of the schema node that reported the error
        keyword: The schema keyword that was violated
        value: The value that failed validation
        causes: Errors of the failed branches of an anyOf/oneOf
    """
    code: ErrorCode
    path: str
    message: str
    schema_path: Optional[str] = None
    keyword: Optional[str] = None
    value: Any = None
    causes: List["ValidationError"] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


class SchemaError(Exception):
    """
    Base class for errors that indicate a broken schema rather than
    a broken instance.

    Attributes:
        location: String form of the location that triggered the error
    """

    def __init__(self, message: str, location: Optional[str] = None):
        super().__init__(message)
        self.location = location


class DocumentLoadError(SchemaError):
    """A document could not be found or parsed."""


class ReferenceResolutionError(SchemaError):
    """A pointer target is missing or a $ref is malformed or circular."""


class SchemaCompilationError(SchemaError):
    """A schema keyword holds a value of the wrong JSON type."""


class SchemaNotBuiltError(SchemaError):
    """A location was looked up before it was built."""


class JsonValidator:
    """
    Main entrypoint class for JSON schema validation.

    This class provides a simple API for validating JSON data
    against an in-memory JSON Schema.
    """

    # Document name under which the in-memory schema is registered
    ROOT_DOCUMENT = ""

    def __init__(self, verbose: bool = False,
                 documents: Optional[Dict[str, Any]] = None):
        """
        Initialize a new JSON validator.

        Args:
            verbose: Whether to include offending values in error messages
            documents: Extra documents that the schema may reference by name
        """
        self.verbose = verbose
        self.documents = dict(documents or {})

    def validate(self, data: Any, schema: Union[Dict[str, Any], bool],
                 pointer: str = "/") -> ValidationResult:
        """
        Validate data against a JSON schema.

        Args:
            data: The data to validate
            schema: The JSON schema to validate against
            pointer: JSON Pointer of the schema to use within the document

        Returns:
            ValidationResult containing validation status and any errors

        Raises:
            SchemaError: If the schema cannot be resolved or compiled
        """
        from .loaders import MemoryDocumentLoader
        from .locations import Location
        from .schema_store import SchemaStore
        from .validator import Validator

        documents = dict(self.documents)
        documents[self.ROOT_DOCUMENT] = schema
        store = SchemaStore(MemoryDocumentLoader(documents))

        # Register the root and compile everything it reaches
        root = store.require(Location(self.ROOT_DOCUMENT, pointer))
        store.build()

        return Validator(store, verbose=self.verbose).validate(root, data)
