"""Bucket operation records into groups and name the resulting pages.

Each group becomes one ``groups/<slug>.md`` page. Groups are ordered by
their key; operations inside a group by ``(path, method)``.
"""

from __future__ import annotations

import re
from collections import defaultdict

from specref.config import FALLBACK_GROUP
from specref.models import OperationGroup, OperationRecord

_SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")
_TITLE_SPLIT_RE = re.compile(r"[_\-\s]+")


def group_operations(records: list[OperationRecord]) -> list[OperationGroup]:
    """Group *records* by their ``group`` field.

    Args:
        records: Operation records from
            :func:`~specref.parser.extractor.extract_operations`.

    Returns:
        One :class:`~specref.models.OperationGroup` per distinct key,
        sorted by key, each with its operations sorted by path then method.
    """
    buckets: dict[str, list[OperationRecord]] = defaultdict(list)
    for record in records:
        buckets[str(record.group)].append(record)

    return [
        OperationGroup(
            key=key,
            slug=slugify(key),
            title=titleize(key),
            operations=sorted(
                buckets[key], key=lambda record: (record.path, record.method.value)
            ),
        )
        for key in sorted(buckets)
    ]


def slugify(value: str) -> str:
    """Convert a group key to a filename-safe slug.

    Lowercases, replaces each run of characters outside ``[a-z0-9]`` with a
    single hyphen, and strips leading/trailing hyphens. Returns ``misc``
    when nothing is left.

    Example::

        slugify("Fine-tuning")   # "fine-tuning"
        slugify("Audio / Speech")  # "audio-speech"
        slugify("???")           # "misc"
    """
    slug = _SLUG_SEPARATOR_RE.sub("-", str(value).lower()).strip("-")
    return slug or FALLBACK_GROUP


def titleize(value: str) -> str:
    """Turn a group key into a display title.

    Splits on underscores, hyphens and whitespace, capitalises the first
    character of each piece (leaving the rest untouched), and joins the
    pieces with single spaces.

    Example::

        titleize("vector_stores")  # "Vector Stores"
        titleize("fine-tuning")    # "Fine Tuning"
        titleize("realtime API")   # "Realtime API"
    """
    parts = [part for part in _TITLE_SPLIT_RE.split(str(value)) if part]
    return " ".join(part[0].upper() + part[1:] for part in parts)
