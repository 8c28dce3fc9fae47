"""
Utility classes and functions for the JSON Schema store.
"""

from typing import Any, FrozenSet, List


class JsonPointer:
    """
    Utility class for handling JSON Pointers (RFC 6901).

    JSON Pointers are used to reference specific locations within a JSON document.
    The single-slash pointer "/" is treated as the document root.
    """

    ROOT = "/"

    @staticmethod
    def from_parts(parts: List[Any]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: List of path segments

        Returns:
            JSON Pointer string
        """
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: Any) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # Replace ~ with ~0 and / with ~1
        return str(part).replace("~", "~0").replace("/", "~1")

    @staticmethod
    def unescape_part(part: str) -> str:
        """
        Unescape a JSON Pointer path segment.

        Args:
            part: Escaped path segment

        Returns:
            Unescaped path segment
        """
        # Replace ~1 with / and ~0 with ~
        return part.replace("~1", "/").replace("~0", "~")

    @staticmethod
    def is_root(pointer: str) -> bool:
        """Check whether a pointer addresses the whole document."""
        return pointer in ("", JsonPointer.ROOT)

    @staticmethod
    def append(pointer: str, *parts: Any) -> str:
        """
        Append path segments to a pointer.

        Args:
            pointer: Base JSON Pointer
            parts: Unescaped segments to add

        Returns:
            Extended JSON Pointer string
        """
        base = "" if JsonPointer.is_root(pointer) else pointer
        return base + JsonPointer.from_parts(list(parts))

    @staticmethod
    def to_parts(pointer: str) -> List[str]:
        """
        Split a JSON Pointer into its component parts.

        Args:
            pointer: JSON Pointer string

        Returns:
            List of path segments
        """
        if JsonPointer.is_root(pointer):
            return []

        if not pointer.startswith("/"):
            raise ValueError(f"Invalid JSON Pointer: {pointer}")

        # Skip the first character (/) and split on remaining /
        parts = pointer[1:].split("/")

        # Unescape each part
        return [JsonPointer.unescape_part(part) for part in parts]

    @staticmethod
    def resolve(document: Any, pointer: str) -> Any:
        """
        Resolve a JSON Pointer within a document.

        Args:
            document: The JSON document to navigate
            pointer: JSON Pointer string

        Returns:
            The referenced value

        Raises:
            ValueError: If the pointer cannot be resolved
        """
        current = document

        for part in JsonPointer.to_parts(pointer):
            if isinstance(current, dict):
                if part not in current:
                    raise ValueError(f"Failed to resolve JSON Pointer: {pointer}, part '{part}' not found")
                current = current[part]
            elif isinstance(current, list):
                if not part.isdigit() or (len(part) > 1 and part.startswith("0")):
                    raise ValueError(f"Failed to resolve JSON Pointer: {pointer}, invalid array index '{part}'")
                index = int(part)
                if index >= len(current):
                    raise ValueError(f"Failed to resolve JSON Pointer: {pointer}, index {index} out of range")
                current = current[index]
            else:
                raise ValueError(f"Failed to resolve JSON Pointer: {pointer}, cannot navigate into {type(current).__name__}")

        return current


class TypeUtils:
    """Utilities for working with JSON Schema types."""

    JSON_TYPES: FrozenSet[str] = frozenset({
        "number", "integer", "string", "boolean", "null", "object", "array"
    })

    @staticmethod
    def is_number(value: Any) -> bool:
        """Check for a JSON number; booleans are not numbers."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def is_integer(value: Any) -> bool:
        """Check for a JSON number with a zero fractional part."""
        if isinstance(value, float):
            return value.is_integer()
        return TypeUtils.is_number(value)

    @staticmethod
    def get_json_type(value: Any) -> str:
        """
        Get the JSON Schema type for a Python value.

        Args:
            value: Python value

        Returns:
            JSON Schema type name
        """
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "boolean"
        elif isinstance(value, int):
            return "integer"
        elif isinstance(value, float):
            return "number"
        elif isinstance(value, str):
            return "string"
        elif isinstance(value, list):
            return "array"
        elif isinstance(value, dict):
            return "object"
        else:
            return "unknown"

    @staticmethod
    def matches_type(value: Any, schema_type: str) -> bool:
        """
        Check whether a value satisfies a JSON Schema type name.

        Args:
            value: Python value
            schema_type: JSON Schema type name

        Returns:
            True if the value is of that type
        """
        if schema_type == "number":
            return TypeUtils.is_number(value)
        if schema_type == "integer":
            return TypeUtils.is_integer(value)
        if schema_type == "string":
            return isinstance(value, str)
        if schema_type == "boolean":
            return isinstance(value, bool)
        if schema_type == "null":
            return value is None
        if schema_type == "object":
            return isinstance(value, dict)
        if schema_type == "array":
            return isinstance(value, list)
        return False


class SchemaKeywords:
    """Constants for JSON Schema keywords."""

    # Type keywords
    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    MULTIPLE_OF = "multipleOf"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"

    # Array keywords
    ITEMS = "items"

    # Object keywords
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    REQUIRED = "required"

    # Schema composition
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"

    # References
    REF = "$ref"
