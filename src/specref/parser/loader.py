"""Load OpenAPI documents from a local file.

This module handles all input I/O. The document is parsed with
``yaml.safe_load``, which also reads JSON (JSON is a subset of YAML),
resolves anchors and aliases, and accepts timestamp scalars, while
rejecting every application-specific tag such as ``!!python/object``.

The two public functions are:

* :func:`load_document` -- Read and parse a document into a plain tree.
* :func:`document_info` -- Pull the index header fields out of the tree.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from specref.exceptions import SpecFileError, SpecParseError
from specref.models import DocumentInfo

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> dict[Any, Any]:
    """Load an OpenAPI document from a local path.

    A root that is not a mapping (an empty file, a bare list, a scalar) is
    not an error: it is reported as a warning and an empty document is
    returned, so the run produces an index with no groups.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file.

    Returns:
        The parsed root mapping.

    Raises:
        SpecFileError: If the file does not exist or cannot be read.
        SpecParseError: If the content is not valid YAML/JSON or uses a
            disallowed tag.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecFileError(f"Spec file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecFileError(f"Failed to read spec file {path}: {exc}") from exc

    document = _parse_content(content, source=str(path))
    if not isinstance(document, dict):
        kind = type(document).__name__ if document is not None else "empty document"
        logger.warning("Spec root is not a mapping (got %s); treating as empty", kind)
        return {}

    logger.debug("Loaded %s (%d top-level keys)", path, len(document))
    return document


def _parse_content(content: str, source: str = "") -> Any:
    """Parse *content* as YAML; JSON input takes the same path.

    Args:
        content: The raw document text.
        source: Label used in error messages.

    Returns:
        Whatever the root node parses to.

    Raises:
        SpecParseError: On any YAML error, including constructor errors
            raised for disallowed tags.
    """
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        where = f" {source}" if source else ""
        raise SpecParseError(f"Failed to parse spec{where}: {exc}") from exc


def document_info(document: dict[Any, Any]) -> DocumentInfo:
    """Extract the title and version fields shown at the top of ``index.md``.

    A missing or non-mapping ``info`` object yields empty fields.
    """
    info = document.get("info")
    if not isinstance(info, dict):
        info = {}

    return DocumentInfo(
        title=_text(info.get("title")),
        openapi_version=_text(document.get("openapi")),
        api_version=_text(info.get("version")),
    )


def _text(value: Any) -> str | None:
    if value is None or value is False or value == "":
        return None
    return str(value)
