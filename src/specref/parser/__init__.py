"""OpenAPI document parser -- load, resolve ``$ref`` pointers, and extract operations.

This sub-package is the first half of the specref pipeline: turning a raw
OpenAPI document (YAML or JSON, local file) into a list of
:class:`~specref.models.OperationRecord` objects the generator can group
and render.

Typical usage::

    from specref.parser import load_document, extract_operations

    document = load_document("openapi.yaml")
    records = extract_operations(document)

Sub-modules:

* :mod:`~specref.parser.loader` -- File I/O and YAML/JSON parsing.
* :mod:`~specref.parser.resolver` -- Single-hop local ``$ref`` lookup.
* :mod:`~specref.parser.extractor` -- Walks ``paths`` and produces
  operation records.
"""

from specref.parser.extractor import extract_operations
from specref.parser.loader import document_info, load_document
from specref.parser.resolver import resolve

__all__ = ["load_document", "document_info", "extract_operations", "resolve"]
