"""
Schema compiler turning one schema location into an immutable node.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Optional, Pattern, Tuple, Union

from .api import SchemaCompilationError
from .locations import Location
from .schema_node import Number, SchemaNode
from .utils import SchemaKeywords, TypeUtils


class SchemaCompiler:
    """
    Compiles the JSON content of a location into a SchemaNode.

    Sub-schemas are not compiled recursively. Their locations are
    registered with the store instead, and the node keeps the canonical
    location that the store returns; the store's build loop compiles them
    later. Absent keywords are left as None on the node.
    """

    def compile(self, store, location: Location) -> SchemaNode:
        """
        Compile the schema stored at a location.

        Args:
            store: Schema store used to read content and register sub-schemas
            location: Location of the schema

        Returns:
            The compiled schema node

        Raises:
            SchemaCompilationError: If the content is not a schema or a
                keyword holds a value of the wrong JSON type
        """
        schema = store.resolve(location)

        # Boolean schemas
        if schema is True:
            return SchemaNode(location)
        if schema is False:
            return SchemaNode(location, reject_all=True)

        if not isinstance(schema, dict):
            raise SchemaCompilationError(
                f"Expected a schema at {location}, got {TypeUtils.get_json_type(schema)}",
                str(location))

        return SchemaNode(
            location=location,
            explicit_types=self._compile_types(schema, location),
            minimum=self._number(schema, SchemaKeywords.MINIMUM, location),
            maximum=self._number(schema, SchemaKeywords.MAXIMUM, location),
            exclusive_minimum=self._number(schema, SchemaKeywords.EXCLUSIVE_MINIMUM, location),
            exclusive_maximum=self._number(schema, SchemaKeywords.EXCLUSIVE_MAXIMUM, location),
            multiple_of=self._number(schema, SchemaKeywords.MULTIPLE_OF, location, positive=True),
            min_length=self._length(schema, SchemaKeywords.MIN_LENGTH, location),
            max_length=self._length(schema, SchemaKeywords.MAX_LENGTH, location),
            properties=self._compile_properties(store, schema, location),
            pattern_properties=self._compile_pattern_properties(store, schema, location),
            additional_properties=self._compile_additional_properties(store, schema, location),
            required=self._compile_required(schema, location),
            items=self._compile_items(store, schema, location),
            all_of=self._compile_schema_list(store, schema, SchemaKeywords.ALL_OF, location),
            any_of=self._compile_schema_list(store, schema, SchemaKeywords.ANY_OF, location),
            one_of=self._compile_schema_list(store, schema, SchemaKeywords.ONE_OF, location),
        )

    def _compile_types(self, schema: Dict[str, Any], location: Location) -> FrozenSet[str]:
        """Normalize a single type name or an array of names to a set."""
        if SchemaKeywords.TYPE not in schema:
            return frozenset()

        type_value = schema[SchemaKeywords.TYPE]
        names = [type_value] if isinstance(type_value, str) else type_value
        if not isinstance(names, list):
            raise self._error(location, SchemaKeywords.TYPE, "a type name or an array of type names")

        for name in names:
            if not isinstance(name, str) or name not in TypeUtils.JSON_TYPES:
                raise SchemaCompilationError(
                    f"Unknown type {name!r} at {location}", str(location))
        return frozenset(names)

    def _number(self, schema: Dict[str, Any], keyword: str, location: Location,
                positive: bool = False) -> Optional[Number]:
        if keyword not in schema:
            return None

        value = schema[keyword]
        if not TypeUtils.is_number(value):
            raise self._error(location, keyword, "a number")
        if positive and value <= 0:
            raise self._error(location, keyword, "a number greater than 0")
        return value

    def _length(self, schema: Dict[str, Any], keyword: str, location: Location) -> Optional[int]:
        if keyword not in schema:
            return None

        value = schema[keyword]
        if not TypeUtils.is_integer(value) or value < 0:
            raise self._error(location, keyword, "a non-negative integer")
        return int(value)

    def _compile_properties(self, store, schema: Dict[str, Any], location: Location):
        properties = self._object(schema, SchemaKeywords.PROPERTIES, location)
        compiled = {}
        for name, sub_schema in properties.items():
            compiled[name] = self._require(
                store, location.append(SchemaKeywords.PROPERTIES, name), sub_schema)
        return MappingProxyType(compiled)

    def _compile_pattern_properties(self, store, schema: Dict[str, Any],
                                    location: Location) -> Tuple[Tuple[Pattern, Location], ...]:
        """Compile pattern properties, keeping their declaration order."""
        pattern_properties = self._object(schema, SchemaKeywords.PATTERN_PROPERTIES, location)
        compiled = []
        for pattern, sub_schema in pattern_properties.items():
            try:
                regex = re.compile(pattern)
            except re.error as e:
                raise SchemaCompilationError(
                    f"Invalid regex pattern '{pattern}' at {location}: {e}", str(location)) from e
            sub_location = self._require(
                store, location.append(SchemaKeywords.PATTERN_PROPERTIES, pattern), sub_schema)
            compiled.append((regex, sub_location))
        return tuple(compiled)

    def _compile_additional_properties(self, store, schema: Dict[str, Any],
                                       location: Location) -> Optional[Location]:
        if SchemaKeywords.ADDITIONAL_PROPERTIES not in schema:
            return None
        return self._require(
            store,
            location.append(SchemaKeywords.ADDITIONAL_PROPERTIES),
            schema[SchemaKeywords.ADDITIONAL_PROPERTIES])

    def _compile_required(self, schema: Dict[str, Any], location: Location) -> Tuple[str, ...]:
        if SchemaKeywords.REQUIRED not in schema:
            return ()

        required = schema[SchemaKeywords.REQUIRED]
        if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
            raise self._error(location, SchemaKeywords.REQUIRED, "an array of strings")
        # Duplicates would report the same missing property twice
        return tuple(dict.fromkeys(required))

    def _compile_items(self, store, schema: Dict[str, Any],
                       location: Location) -> Union[None, Location, Tuple[Location, ...]]:
        """
        Compile `items` into one location for all elements or a positional tuple.
        """
        if SchemaKeywords.ITEMS not in schema:
            return None

        items = schema[SchemaKeywords.ITEMS]
        items_location = location.append(SchemaKeywords.ITEMS)
        if isinstance(items, list):
            return tuple(
                self._require(store, items_location.append(i), item)
                for i, item in enumerate(items))
        return self._require(store, items_location, items)

    def _compile_schema_list(self, store, schema: Dict[str, Any], keyword: str,
                             location: Location) -> Optional[Tuple[Location, ...]]:
        if keyword not in schema:
            return None

        sub_schemas = schema[keyword]
        if not isinstance(sub_schemas, list):
            raise self._error(location, keyword, "an array of schemas")

        keyword_location = location.append(keyword)
        return tuple(
            self._require(store, keyword_location.append(i), sub_schema)
            for i, sub_schema in enumerate(sub_schemas))

    def _object(self, schema: Dict[str, Any], keyword: str, location: Location) -> Dict[str, Any]:
        value = schema.get(keyword, {})
        if not isinstance(value, dict):
            raise self._error(location, keyword, "an object")
        return value

    def _require(self, store, location: Location, sub_schema: Any) -> Location:
        """Register a sub-schema with the store and return its canonical location."""
        if not isinstance(sub_schema, (dict, bool)):
            raise SchemaCompilationError(
                f"Expected a schema at {location}, got {TypeUtils.get_json_type(sub_schema)}",
                str(location))
        return store.require(location)

    @staticmethod
    def _error(location: Location, keyword: str, expected: str) -> SchemaCompilationError:
        return SchemaCompilationError(
            f"Keyword '{keyword}' at {location} must be {expected}", str(location))
