#!/usr/bin/env python3
"""
Integration tests for schemas spread over several documents.
"""
import json

import pytest

# autopep8: off
from utils import setup, memory_store
setup()
from json_schema_store import (
    ErrorCode,
    FileDocumentLoader,
    Location,
    SchemaStore,
    Validator,
)
# autopep8: on


PROJECT_SCHEMA = {
    "title": "Project Configuration",
    "type": "object",
    "additionalProperties": {"$ref": "#/definitions/project"},
    "definitions": {
        "project": {
            "type": "object",
            "properties": {
                "library": {"type": "boolean"},
                "executable": {"type": "boolean"},
                "version": {"$ref": "common.json#/definitions/version"},
                "includes": {
                    "type": "array",
                    "items": {"$ref": "include.json"}
                }
            },
            "required": ["library"],
            "additionalProperties": False
        }
    }
}

INCLUDE_SCHEMA = {
    "type": "object",
    "properties": {
        "platform": {"oneOf": [
            {"type": "string", "maxLength": 7},
            {"type": "array", "items": {"type": "string"}}
        ]},
        "public": {"$ref": "common.json#/definitions/paths"},
        "private": {"$ref": "common.json#/definitions/paths"}
    },
    "patternProperties": {"^x-": {}},
    "required": ["platform"],
    "additionalProperties": False
}

COMMON_SCHEMA = {
    "definitions": {
        "paths": {"type": "array", "items": {"$ref": "#/definitions/path"}},
        "path": {"type": "string", "minLength": 1},
        "version": {
            "anyOf": [
                {"type": "string", "minLength": 5},
                {"type": "integer", "minimum": 1}
            ]
        }
    }
}

DOCUMENTS = {
    "project.json": PROJECT_SCHEMA,
    "include.json": INCLUDE_SCHEMA,
    "common.json": COMMON_SCHEMA,
}


@pytest.fixture
def valid_config():
    """Create a valid configuration for testing."""
    return {
        "test_project": {
            "library": True,
            "executable": False,
            "version": "1.2.3",
            "includes": [
                {"platform": "any", "public": ["include/header.h"], "x-note": 1},
                {"platform": ["linux", "windows"], "private": ["src"]}
            ]
        },
        "tool": {"library": False, "version": 2}
    }


@pytest.fixture
def invalid_config():
    """Create an invalid configuration for testing."""
    return {
        "test_project": {
            "library": "yes",
            "version": "1.2",
            "includes": [
                {"public": ["include/header.h", ""]},
                {"platform": "android-arm64", "extra": True}
            ]
        }
    }


class TestMultiDocumentSchema:
    """Tests for a schema made of several in-memory documents."""

    def setup_method(self):
        """Set up the test environment."""
        self.store = memory_store(DOCUMENTS)
        self.root = self.store.require(Location("project.json"))
        self.store.build()
        self.validator = Validator(self.store)

    def test_build_reaches_every_document(self):
        """Test that building the root pulls in every referenced document."""
        documents = {location.document for location in self.store.built}
        assert documents == {"project.json", "include.json", "common.json"}
        assert not self.store.pending

    def test_aliases_are_not_built(self):
        """Test that $ref objects never become nodes of their own."""
        assert Location("project.json", "/additionalProperties") not in self.store.built
        assert Location("project.json", "/definitions/project") in self.store.built
        assert Location("include.json", "/properties/public") not in self.store.built
        assert Location("common.json", "/definitions/paths") in self.store.built

    def test_valid_config(self, valid_config):
        """Test that a valid config passes validation."""
        result = self.validator.validate(self.root, valid_config)
        assert result.valid, [str(e) for e in result.errors]

    def test_invalid_config(self, invalid_config):
        """Test that every problem in an invalid config is reported."""
        result = self.validator.validate(self.root, invalid_config)

        reported = sorted((e.path, e.code) for e in result.errors)
        assert reported == sorted([
            ("/test_project/library", ErrorCode.TYPE_ERROR),
            ("/test_project/version", ErrorCode.ANY_OF_NO_MATCH),
            ("/test_project/includes/0/public/1", ErrorCode.STRING_TOO_SHORT),
            ("/test_project/includes/0", ErrorCode.REQUIRED_PROPERTY_MISSING),
            ("/test_project/includes/1/platform", ErrorCode.ONE_OF_NO_MATCH),
            ("/test_project/includes/1/extra", ErrorCode.FALSE_SCHEMA),
        ])

    def test_error_schema_paths_name_the_document(self, invalid_config):
        """Test that errors point at the document holding the failing keyword."""
        result = self.validator.validate(self.root, invalid_config)

        schema_paths = {e.path: e.schema_path for e in result.errors}
        assert schema_paths["/test_project/includes/0/public/1"] == "common.json#/definitions/path"
        assert schema_paths["/test_project/includes/0"] == "include.json#/"

    def test_shared_store_serves_several_roots(self):
        """Test validating against a second root after extending the store."""
        include = self.store.require("include.json")
        self.store.build()

        assert self.validator.validate(include, {"platform": "linux"}).valid
        assert not self.validator.validate(include, {}).valid


def test_config_files_on_disk(tmp_path, valid_config, invalid_config):
    """Test the same schema read from JSON and YAML files."""
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    (schema_dir / "project.json").write_text(json.dumps(PROJECT_SCHEMA), encoding="utf-8")
    (schema_dir / "include.json").write_text(json.dumps(INCLUDE_SCHEMA), encoding="utf-8")
    (schema_dir / "common.json").write_text(json.dumps(COMMON_SCHEMA), encoding="utf-8")

    store = SchemaStore(FileDocumentLoader(base_dir=tmp_path))
    root = store.require(Location("schemas/project.json"))
    store.build()

    validator = Validator(store)
    assert validator.validate(root, valid_config).valid
    assert len(validator.validate(root, invalid_config).errors) == 6
