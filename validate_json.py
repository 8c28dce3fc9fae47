#!/usr/bin/env python3
"""
JSON Schema Validator

This script validates a JSON or YAML document against a JSON schema that
may be spread over several files linked by $ref.

Usage:
    python validate_json.py <data_file> <schema_file>[#/pointer] [--verbose]
"""

import sys

from json_schema_store.cli import main

if __name__ == "__main__":
    sys.exit(main())
