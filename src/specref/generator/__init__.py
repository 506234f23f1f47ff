"""Markdown generator -- group operation records and render reference pages.

This sub-package is the second half of the specref pipeline. It buckets
:class:`~specref.models.OperationRecord` objects into
:class:`~specref.models.OperationGroup` pages and renders them, together
with an index, through the Jinja2 templates in ``templates/``.

Typical usage::

    from specref.generator import generate_reference

    result = generate_reference(options)
    print(result.index_path)

Sub-modules:

* :mod:`~specref.generator.grouping` -- Group keys, slugs and titles.
* :mod:`~specref.generator.labels` -- One-line schema labels.
* :mod:`~specref.generator.markdown` -- Operation views and file output.
"""

from __future__ import annotations

import logging

from specref.generator.grouping import group_operations, slugify, titleize
from specref.generator.labels import schema_label
from specref.generator.markdown import render_reference
from specref.models import GenerationResult, RenderOptions
from specref.parser import document_info, extract_operations, load_document

logger = logging.getLogger(__name__)

__all__ = [
    "generate_reference",
    "group_operations",
    "render_reference",
    "schema_label",
    "slugify",
    "titleize",
]


def generate_reference(options: RenderOptions) -> GenerationResult:
    """Run the whole pipeline: load, extract, group, render.

    Args:
        options: The validated invocation options.

    Returns:
        The files written and the number of operations rendered.

    Raises:
        SpecFileError: If the input cannot be read.
        SpecParseError: If the input cannot be parsed.
        OutputWriteError: If the output cannot be written.
    """
    document = load_document(options.spec_path)
    records = extract_operations(document)
    groups = group_operations(records)
    logger.debug("Rendering %d operations in %d groups", len(records), len(groups))
    return render_reference(document, document_info(document), groups, options)
