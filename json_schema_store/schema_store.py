"""
Schema store with lazy, worklist-driven schema building.

Locations are registered with `require`, which chases `$ref` aliases down
to the location that actually holds a schema. `build` then compiles pending
locations until none are left; compiling one location usually registers the
locations of its sub-schemas, which are picked up by the same loop.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Set, Union

from .api import (
    DocumentLoadError,
    ReferenceResolutionError,
    SchemaError,
    SchemaNotBuiltError,
)
from .loaders import DocumentLoader
from .locations import Location, LocationLike, as_location
from .schema_compiler import SchemaCompiler
from .schema_node import SchemaNode
from .utils import JsonPointer, SchemaKeywords

logger = logging.getLogger("json_schema_store")


class SchemaStore:
    """
    Owns the pending set and the built map of schema locations.

    A location is always in exactly one of three states: absent, pending
    or built. Built nodes are never rebuilt or removed.
    """

    DEFAULT_MAX_LOCATIONS = 10000

    def __init__(self,
                 loader: Union[DocumentLoader, Callable[[str], Any]],
                 compiler: Optional[SchemaCompiler] = None,
                 max_locations: int = DEFAULT_MAX_LOCATIONS):
        """
        Initialize a new schema store.

        Args:
            loader: Document loader, or any callable taking a document part
            compiler: Compiler used to build nodes; a default one if omitted
            max_locations: Upper bound on the number of locations built
        """
        self.loader = loader
        self.compiler = compiler or SchemaCompiler()
        self.max_locations = max_locations

        # Insertion-ordered set
        self._pending: Dict[Location, None] = {}
        self._built: Dict[Location, SchemaNode] = {}

    @property
    def pending(self) -> FrozenSet[Location]:
        return frozenset(self._pending)

    @property
    def built(self) -> Mapping[Location, SchemaNode]:
        return MappingProxyType(self._built)

    def is_pending(self, location: LocationLike) -> bool:
        return as_location(location) in self._pending

    def is_built(self, location: LocationLike) -> bool:
        return as_location(location) in self._built

    def resolve(self, location: LocationLike) -> Any:
        """
        Read the JSON value stored at a location.

        Args:
            location: Location to read

        Returns:
            The value at the location

        Raises:
            DocumentLoadError: If the document cannot be loaded
            ReferenceResolutionError: If the pointer target does not exist
        """
        location = as_location(location)
        document = self._load(location.document)
        if location.is_root:
            return document

        try:
            return JsonPointer.resolve(document, location.pointer)
        except ValueError as e:
            raise ReferenceResolutionError(str(e), str(location)) from e

    def require(self, location: LocationLike) -> Location:
        """
        Register a location for building.

        If the location is a `$ref` alias, the location it points to is
        registered instead. Registering a location that is already pending
        or built does nothing.

        Args:
            location: Location to register

        Returns:
            The location that was actually registered
        """
        location = self._dereference(as_location(location))
        if location not in self._pending and location not in self._built:
            logger.debug(f"Registering {location}")
            self._pending[location] = None
        return location

    def build(self) -> None:
        """
        Compile pending locations until none are left.

        Raises:
            SchemaError: If a location cannot be resolved or compiled, or if
                more than `max_locations` locations would be built
        """
        while self._pending:
            location = next(iter(self._pending))
            if len(self._built) >= self.max_locations:
                raise SchemaError(
                    f"Schema graph exceeds {self.max_locations} locations", str(location))

            logger.debug(f"Processing {location}")
            self._built[location] = self.compiler.compile(self, location)
            del self._pending[location]

    def get(self, location: LocationLike) -> SchemaNode:
        """
        Look up the built node for a location.

        Aliases are followed without registering anything.

        Args:
            location: Location to look up

        Returns:
            The compiled schema node

        Raises:
            SchemaNotBuiltError: If the location has not been built
        """
        location = self._dereference(as_location(location))
        node = self._built.get(location)
        if node is None:
            raise SchemaNotBuiltError(f"Schema at {location} has not been built", str(location))
        return node

    def _load(self, document: str) -> Any:
        load = self.loader.load if isinstance(self.loader, DocumentLoader) else self.loader
        try:
            return load(document)
        except DocumentLoadError:
            raise
        except (OSError, KeyError, ValueError) as e:
            raise DocumentLoadError(f"Cannot load document '{document}': {e}", document) from e

    def _dereference(self, location: Location) -> Location:
        """Follow `$ref` aliases until a schema or a known location is reached."""
        visited: Set[Location] = set()
        while location not in self._pending and location not in self._built:
            if location in visited:
                raise ReferenceResolutionError(
                    f"Circular $ref chain through {location}", str(location))
            visited.add(location)

            target = self._alias_target(location)
            if target is None:
                break
            logger.debug(f"{location} refers to {target}")
            location = target
        return location

    def _alias_target(self, location: Location) -> Optional[Location]:
        value = self.resolve(location)
        if not isinstance(value, dict) or SchemaKeywords.REF not in value:
            return None

        ref = value[SchemaKeywords.REF]
        if ref == "":
            return None
        return location.follow(ref)
