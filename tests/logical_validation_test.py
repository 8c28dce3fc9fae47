#!/usr/bin/env python3
"""
Tests for logical validation operators (allOf, anyOf, oneOf).
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_schema_store import ErrorCode, JsonValidator
# autopep8: on


class TestLogicalValidation:
    """Tests for logical schema validation operators."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_any_of_validation(self):
        """Test that anyOf reports a single error when no branch passes."""
        schema = {"anyOf": [{"type": "string"}, {"type": "number"}]}

        result = self.validator.validate("x", schema)
        assert result.valid
        assert not result.errors

        result = self.validator.validate(True, schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ANY_OF_NO_MATCH
        assert "does not match any" in result.errors[0].message

    def test_any_of_keeps_branch_errors_as_causes(self):
        """Test that branch errors are attached to the anyOf error."""
        schema = {"anyOf": [{"type": "string"}, {"type": "number"}]}

        result = self.validator.validate(True, schema)
        causes = result.errors[0].causes
        assert len(causes) == 2
        assert all(c.code == ErrorCode.TYPE_ERROR for c in causes)
        assert [c.schema_path for c in causes] == ["#/anyOf/0", "#/anyOf/1"]

    def test_any_of_with_constraints(self):
        """Test anyOf with type-specific keywords."""
        schema = {
            "anyOf": [
                {"type": "string", "minLength": 3},
                {"type": "number", "minimum": 10}
            ]
        }

        assert self.validator.validate("test", schema).valid
        assert self.validator.validate(42, schema).valid

        result = self.validator.validate("ab", schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ANY_OF_NO_MATCH

    def test_one_of_validation(self):
        """Test that oneOf requires exactly one passing branch."""
        schema = {"oneOf": [{"minimum": 0}, {"maximum": 10}]}

        result = self.validator.validate(5, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ONE_OF_MULTIPLE_MATCHES
        assert "2 oneOf schemas passed" in result.errors[0].message

        result = self.validator.validate(-5, schema)
        assert result.valid

        result = self.validator.validate(20, schema)
        assert result.valid

    def test_one_of_no_match(self):
        """Test oneOf when no branch passes."""
        schema = {"oneOf": [{"type": "string"}, {"type": "null"}]}

        result = self.validator.validate(20, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ONE_OF_NO_MATCH
        assert "0 oneOf schemas passed" in result.errors[0].message
        assert len(result.errors[0].causes) == 2

    def test_all_of_validation(self):
        """Test that allOf forwards every branch error."""
        schema = {
            "allOf": [
                {"type": "number"},
                {"minimum": 10},
                {"multipleOf": 4}
            ]
        }

        assert self.validator.validate(12, schema).valid

        result = self.validator.validate(5, schema)
        assert [e.code for e in result.errors] == [
            ErrorCode.NUMBER_TOO_SMALL, ErrorCode.NUMBER_NOT_MULTIPLE
        ]
        assert [e.schema_path for e in result.errors] == ["#/allOf/1", "#/allOf/2"]

        result = self.validator.validate(True, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TYPE_ERROR

    def test_nested_combinators_are_isolated(self):
        """Test that errors inside anyOf branches never leak upwards."""
        schema = {
            "allOf": [
                {
                    "anyOf": [
                        {"required": ["a"], "properties": {"a": {"type": "string"}}},
                        {"required": ["b"]}
                    ]
                }
            ]
        }

        assert self.validator.validate({"b": 1}, schema).valid

        result = self.validator.validate({"a": 1}, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ANY_OF_NO_MATCH

    def test_combinators_run_with_other_keywords(self):
        """Test that combinator errors add to the node's other errors."""
        schema = {
            "type": "string",
            "anyOf": [{"minLength": 5}],
            "oneOf": [{"maxLength": 0}]
        }

        result = self.validator.validate("abc", schema)
        assert [e.code for e in result.errors] == [
            ErrorCode.ANY_OF_NO_MATCH, ErrorCode.ONE_OF_NO_MATCH
        ]

    def test_empty_any_of_never_passes(self):
        """Test an anyOf without branches."""
        result = self.validator.validate(1, {"anyOf": []})
        assert len(result.errors) == 1
