"""
Schema locations: a document part plus a JSON Pointer fragment.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union
from urllib.parse import unquote, urljoin

import rfc3987

from .api import ReferenceResolutionError
from .utils import JsonPointer


@dataclass(frozen=True)
class Location:
    """
    Canonical address of a schema within a set of documents.

    Two locations are equal when their document parts and normalized
    pointers are equal. An empty pointer is normalized to the root "/".

    Attributes:
        document: Document part, as handed to the document loader
        pointer: JSON Pointer into that document (unescaped form)
    """
    document: str
    pointer: str = JsonPointer.ROOT

    def __post_init__(self):
        if JsonPointer.is_root(self.pointer):
            object.__setattr__(self, "pointer", JsonPointer.ROOT)

    @classmethod
    def parse(cls, value: str) -> "Location":
        """
        Parse a location from its "<document>#<pointer>" form.

        The document part is taken verbatim, so plain filesystem paths are
        accepted; the fragment is percent-decoded.

        Args:
            value: Location string

        Returns:
            The parsed location

        Raises:
            ReferenceResolutionError: If the fragment is not a JSON Pointer
        """
        document, _, fragment = value.partition("#")
        return cls(document, _decode_fragment(fragment, value))

    @property
    def is_root(self) -> bool:
        return self.pointer == JsonPointer.ROOT

    def append(self, *parts: Any) -> "Location":
        """
        Create the location of a child value.

        Args:
            parts: Unescaped keys or indices to descend through

        Returns:
            Location of the child within the same document
        """
        return Location(self.document, JsonPointer.append(self.pointer, *parts))

    def follow(self, ref: Any) -> "Location":
        """
        Rewrite a $ref value relative to this location.

        A ref without a document part stays in this document; a relative
        document part is joined against this document; a ref without a
        fragment points at the root of its document.

        Args:
            ref: Value of the $ref keyword

        Returns:
            The location the reference points to

        Raises:
            ReferenceResolutionError: If the ref is not a valid IRI reference
        """
        document, fragment = parse_ref(ref, origin=self)
        if not document:
            document = self.document
        elif self.document:
            document = urljoin(self.document, document)
        return Location(document, fragment)

    def __str__(self) -> str:
        return f"{self.document}#{self.pointer}"


LocationLike = Union[Location, str]


def as_location(value: LocationLike) -> Location:
    """Coerce a string or location into a location."""
    if isinstance(value, Location):
        return value
    return Location.parse(value)


def parse_ref(ref: Any, origin: Optional[Location] = None) -> Tuple[str, str]:
    """
    Split a $ref value into its document part and decoded pointer.

    Args:
        ref: Value of the $ref keyword
        origin: Location holding the ref, for error reporting

    Returns:
        Tuple of (document part, JSON Pointer); either may be empty

    Raises:
        ReferenceResolutionError: If the ref is not a string or not a valid
            IRI reference
    """
    where = str(origin) if origin is not None else None
    if not isinstance(ref, str):
        raise ReferenceResolutionError(
            f"$ref must be a string, got {type(ref).__name__}", where)

    try:
        parts = rfc3987.parse(ref, rule="IRI_reference")
    except ValueError as e:
        raise ReferenceResolutionError(f"Malformed $ref '{ref}': {e}", where) from e

    document = ref.partition("#")[0]
    return document, _decode_fragment(parts["fragment"] or "", ref, where)


def _decode_fragment(fragment: str, source: str, where: Optional[str] = None) -> str:
    pointer = unquote(fragment)
    if pointer and not pointer.startswith("/"):
        raise ReferenceResolutionError(
            f"Fragment of '{source}' is not a JSON Pointer", where)
    return pointer
