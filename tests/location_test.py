#!/usr/bin/env python3
"""
Tests for schema locations and $ref rewriting.
"""
import pytest

# autopep8: off
from utils import setup, memory_store
setup()
from json_schema_store import Location, ReferenceResolutionError
# autopep8: on


class TestLocation:
    """Tests for the Location value type."""

    def test_empty_pointer_is_root(self):
        """Test that a missing fragment normalizes to the root pointer."""
        assert Location("a.json") == Location("a.json", "")
        assert Location("a.json").pointer == "/"
        assert Location("a.json").is_root
        assert hash(Location("a.json")) == hash(Location("a.json", ""))

    def test_parse(self):
        """Test parsing the string form of a location."""
        assert Location.parse("a.json") == Location("a.json", "/")
        assert Location.parse("a.json#") == Location("a.json", "/")
        assert Location.parse("a.json#/definitions/x") == Location("a.json", "/definitions/x")
        assert Location.parse("#/definitions/x") == Location("", "/definitions/x")

    def test_parse_percent_encoded_fragment(self):
        """Test that fragments are percent-decoded."""
        location = Location.parse("a.json#/definitions/my%20type")
        assert location.pointer == "/definitions/my type"

    def test_str(self):
        """Test the canonical string form."""
        assert str(Location("a.json")) == "a.json#/"
        assert str(Location("a.json", "/properties/x")) == "a.json#/properties/x"

    def test_append(self):
        """Test building child locations."""
        root = Location("a.json")
        assert root.append("properties", "x") == Location("a.json", "/properties/x")
        assert root.append("items", 2) == Location("a.json", "/items/2")
        assert root.append("properties", "a/b").pointer == "/properties/a~1b"


class TestFollow:
    """Tests for rewriting $ref values."""

    def test_fragment_only_ref_inherits_document(self):
        """Test a ref without a document part."""
        here = Location("schemas/root.json", "/properties/x")
        assert here.follow("#/definitions/y") == Location("schemas/root.json", "/definitions/y")

    def test_ref_without_fragment_points_at_root(self):
        """Test a ref without a fragment."""
        here = Location("root.json", "/properties/x")
        assert here.follow("other.json") == Location("other.json", "/")

    def test_relative_document_is_joined(self):
        """Test that relative documents resolve against the current one."""
        here = Location("schemas/root.json")
        assert here.follow("common.json#/defs/a") == Location("schemas/common.json", "/defs/a")

    def test_absolute_document_is_kept(self):
        """Test that absolute URIs are not rewritten."""
        here = Location("schemas/root.json")
        target = here.follow("https://example.com/s.json#/a")
        assert target == Location("https://example.com/s.json", "/a")

    def test_malformed_refs(self):
        """Test refs that cannot be followed."""
        here = Location("root.json")

        with pytest.raises(ReferenceResolutionError):
            here.follow("#anchor")
        with pytest.raises(ReferenceResolutionError):
            here.follow("has space.json")
        with pytest.raises(ReferenceResolutionError):
            here.follow(42)

    def test_non_ascii_refs(self):
        """Test refs naming definitions outside ASCII."""
        here = Location("root.json")

        assert here.follow("#/definitions/café") == Location("root.json", "/definitions/café")
        assert here.follow("schémas/übersicht.json#/a") == Location("schémas/übersicht.json", "/a")

    def test_non_ascii_ref_in_schema(self):
        """Test building a schema that refers to a non-ASCII definition."""
        store = memory_store({"root.json": {
            "definitions": {"café": {"type": "string"}},
            "properties": {"a": {"$ref": "#/definitions/café"}}
        }})

        store.require(Location("root.json"))
        store.build()

        assert Location("root.json", "/definitions/café") in store.built

    @pytest.mark.parametrize("ref", [5, None, True, ["#/a"], {"$ref": "#/a"}])
    def test_non_string_ref_in_schema(self, ref):
        """Test that a $ref holding another JSON type breaks the schema."""
        store = memory_store({"root.json": {"properties": {"a": {"$ref": ref}}}})

        store.require(Location("root.json"))
        with pytest.raises(ReferenceResolutionError) as excinfo:
            store.build()
        assert "$ref must be a string" in str(excinfo.value)
        assert excinfo.value.location == "root.json#/properties/a"
