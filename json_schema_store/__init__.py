#!/usr/bin/env python3
"""
JSON Schema Store

This package resolves JSON Schema documents linked by $ref into canonical
locations, compiles them into immutable schema nodes and validates JSON
instances against them, reporting every violation at once.
"""

import logging

from .api import (
    DocumentLoadError,
    ErrorCode,
    JsonValidator,
    ReferenceResolutionError,
    SchemaCompilationError,
    SchemaError,
    SchemaNotBuiltError,
    ValidationError,
    ValidationResult,
)
from .loaders import DocumentLoader, FileDocumentLoader, MemoryDocumentLoader
from .locations import Location
from .schema_compiler import SchemaCompiler
from .schema_node import SchemaNode
from .schema_store import SchemaStore
from .utils import JsonPointer
from .validator import Validator
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("json_schema_store")

# Export public classes and functions
__all__ = [
    "DocumentLoadError",
    "DocumentLoader",
    "ErrorCode",
    "FileDocumentLoader",
    "JsonPointer",
    "JsonValidator",
    "Location",
    "MemoryDocumentLoader",
    "ReferenceResolutionError",
    "SchemaCompilationError",
    "SchemaCompiler",
    "SchemaError",
    "SchemaNode",
    "SchemaNotBuiltError",
    "SchemaStore",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "__version__",
]
