"""
Document loaders used by the schema store.

The store never performs I/O itself; it hands the document part of a
location to one of these loaders and works on the returned JSON value.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .api import DocumentLoadError

logger = logging.getLogger("json_schema_store")


class DocumentLoader(ABC):
    """
    Base class for document loaders.
    """

    @abstractmethod
    def load(self, document: str) -> Any:
        """
        Load a document by name.

        Args:
            document: Document part of a location

        Returns:
            The parsed JSON value

        Raises:
            DocumentLoadError: If the document is unknown or cannot be parsed
        """
        pass

    def __call__(self, document: str) -> Any:
        return self.load(document)


class MemoryDocumentLoader(DocumentLoader):
    """
    Loader serving already-parsed documents from a dictionary.
    """

    def __init__(self, documents: Optional[Dict[str, Any]] = None):
        self.documents: Dict[str, Any] = dict(documents or {})

    def add(self, document: str, content: Any) -> None:
        """Register a document under a name."""
        self.documents[document] = content

    def load(self, document: str) -> Any:
        if document not in self.documents:
            raise DocumentLoadError(f"Unknown document '{document}'", document)
        return self.documents[document]


class FileDocumentLoader(DocumentLoader):
    """
    Loader reading JSON or YAML documents from the filesystem.

    Parsed documents are cached, so each file is read at most once
    for the lifetime of the loader.
    """

    YAML_SUFFIXES = {".yaml", ".yml"}

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        """
        Initialize a new file loader.

        Args:
            base_dir: Directory that relative document paths are resolved against
        """
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self._cache: Dict[Path, Any] = {}

    def _path_for(self, document: str) -> Path:
        if document.startswith("file://"):
            document = document[len("file://"):]
        path = Path(document)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def load(self, document: str) -> Any:
        path = self._path_for(document)
        if path in self._cache:
            return self._cache[path]

        logger.debug(f"Loading document {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in self.YAML_SUFFIXES:
                    content = yaml.safe_load(f)
                else:
                    content = json.load(f)
        except FileNotFoundError as e:
            raise DocumentLoadError(f"Document not found: {path}", document) from e
        except OSError as e:
            raise DocumentLoadError(f"Cannot read {path}: {e}", document) from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DocumentLoadError(f"Cannot parse {path}: {e}", document) from e

        self._cache[path] = content
        return content
