#!/usr/bin/env python3
"""
Command-line interface for the JSON validator.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import DocumentLoadError, SchemaError
from .loaders import FileDocumentLoader
from .locations import Location
from .schema_store import SchemaStore
from .validator import Validator
from .version import __version__

logger = logging.getLogger("json_schema_store")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_SCHEMA_ERROR = 2
EXIT_DATA_ERROR = 3


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate a JSON or YAML document against a JSON schema."
    )
    parser.add_argument(
        "data_file",
        type=str,
        help="Path to the JSON or YAML data file to validate"
    )
    parser.add_argument(
        "schema",
        type=str,
        help="Path to the schema file, optionally followed by #/json/pointer"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    args = parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    loader = FileDocumentLoader(base_dir=Path.cwd())
    store = SchemaStore(loader)

    try:
        data = loader.load(args.data_file)
    except DocumentLoadError as e:
        logger.error(f"Cannot load data file: {e}")
        return EXIT_DATA_ERROR

    try:
        root = store.require(Location.parse(args.schema))
        store.build()
    except SchemaError as e:
        logger.error(f"Schema error: {e}")
        return EXIT_SCHEMA_ERROR

    logger.debug(f"Built {len(store.built)} schema locations")

    result = Validator(store, verbose=args.verbose).validate(root, data)

    # Report results
    if not result.valid:
        logger.error("Validation failed:")
        for error in result.errors:
            logger.error(f"  - {error}")
        return EXIT_INVALID

    logger.info("Validation successful!")
    return EXIT_VALID


if __name__ == "__main__":
    sys.exit(main())
