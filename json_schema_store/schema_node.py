"""
Compiled, immutable representation of a single schema location.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Pattern, Tuple, Union

from .locations import Location

Number = Union[int, float]


@dataclass(frozen=True)
class SchemaNode:
    """
    Keywords of one schema, with sub-schemas held as store locations.

    Every optional field is None when its keyword is absent from the
    source document. Sub-schema locations are resolved through the
    schema store's built map at validation time, so self-referencing
    schemas need no special handling.
    """
    location: Location
    explicit_types: FrozenSet[str] = frozenset()

    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_minimum: Optional[Number] = None
    exclusive_maximum: Optional[Number] = None
    multiple_of: Optional[Number] = None

    min_length: Optional[int] = None
    max_length: Optional[int] = None

    properties: Mapping[str, Location] = field(default_factory=lambda: MappingProxyType({}))
    pattern_properties: Tuple[Tuple[Pattern, Location], ...] = ()
    additional_properties: Optional[Location] = None
    required: Tuple[str, ...] = ()

    items: Union[None, Location, Tuple[Location, ...]] = None

    all_of: Optional[Tuple[Location, ...]] = None
    any_of: Optional[Tuple[Location, ...]] = None
    one_of: Optional[Tuple[Location, ...]] = None

    # Only set for the boolean schema `false`
    reject_all: bool = False

    def __str__(self) -> str:
        """String representation of the node."""
        parts = []
        if self.explicit_types:
            parts.append(f"types={sorted(self.explicit_types)}")
        if self.properties:
            parts.append(f"properties={list(self.properties)}")
        if self.pattern_properties:
            parts.append(f"pattern_properties={[p.pattern for p, _ in self.pattern_properties]}")
        if self.additional_properties is not None:
            parts.append(f"additional_properties={self.additional_properties}")
        if self.required:
            parts.append(f"required={list(self.required)}")
        for name in ("all_of", "any_of", "one_of"):
            children = getattr(self, name)
            if children is not None:
                parts.append(f"{name}={len(children)}")
        if self.reject_all:
            parts.append("reject_all=True")

        return f"SchemaNode({self.location}{', ' if parts else ''}{', '.join(parts)})"
