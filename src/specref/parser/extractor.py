"""Flatten the ``paths`` object into a list of operation records.

This module walks the raw (unresolved) document and emits one
:class:`~specref.models.OperationRecord` per path + HTTP method pair.
References inside operations are left in place; the renderer resolves
them lazily with :func:`~specref.parser.resolver.resolve`.

The single public entry point is :func:`extract_operations`. Internally:

* ``_merge_parameters`` -- path-level parameters followed by
  operation-level ones, de-duplicated on ``(name, in, $ref)`` keeping the
  first occurrence.
* ``_resolve_group`` -- ``x-oaiMeta.group``, then the first tag, then the
  first path segment, then ``misc``.
* ``_resolve_name`` -- ``x-oaiMeta.name``, then ``summary``, then
  ``operationId``, then ``"<METHOD> <path>"``.

Anything of the wrong shape (a path item that is not a mapping, a
``parameters`` value that is not a list, a ``tags`` value that is not a
list) is treated as absent rather than rejected.
"""

from __future__ import annotations

import logging
from typing import Any

from specref.config import FALLBACK_GROUP
from specref.models import HTTPMethod, OperationRecord

logger = logging.getLogger(__name__)

META_KEY = "x-oaiMeta"


def extract_operations(document: dict[Any, Any]) -> list[OperationRecord]:
    """Extract every operation declared under ``paths``.

    Args:
        document: The raw document root as returned by
            :func:`~specref.parser.loader.load_document`.

    Returns:
        Operation records in document order (path order, then the fixed
        method scan order).

    Example::

        doc = {"paths": {"/widgets": {"get": {"operationId": "listWidgets"}}}}
        [record] = extract_operations(doc)
        record.group, record.name   # ("widgets", "listWidgets")
    """
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return []

    operations: list[OperationRecord] = []

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        path = str(path)
        path_params = _as_list(path_item.get("parameters"))

        for method in HTTPMethod:
            operation = path_item.get(method.value)
            if not isinstance(operation, dict):
                continue

            meta = operation.get(META_KEY)
            if not isinstance(meta, dict):
                meta = {}

            operations.append(
                OperationRecord(
                    group=_resolve_group(path, operation, meta),
                    name=_resolve_name(path, method, operation, meta),
                    method=method,
                    path=path,
                    operation=operation,
                    meta=meta,
                    params=_merge_parameters(
                        path_params, _as_list(operation.get("parameters"))
                    ),
                )
            )

    logger.debug("Extracted %d operations from %d paths", len(operations), len(paths))
    return operations


def _merge_parameters(path_params: list[Any], op_params: list[Any]) -> list[Any]:
    """Concatenate path- and operation-level parameters, dropping repeats.

    Mapping entries are keyed by ``(name, in, $ref)``; any other entry is
    its own key. The first occurrence wins, so a path-level parameter
    shadows an operation-level one with the same key.

    Args:
        path_params: Parameters declared on the path item.
        op_params: Parameters declared on the operation.

    Returns:
        The merged list, in first-seen order.
    """
    merged: list[Any] = []
    seen: list[Any] = []

    for param in [*path_params, *op_params]:
        if isinstance(param, dict):
            key: Any = (param.get("name"), param.get("in"), param.get("$ref"))
        else:
            key = param
        # Keys may be unhashable (a list entry), so compare by equality.
        if key in seen:
            continue
        seen.append(key)
        merged.append(param)

    return merged


def _resolve_group(path: str, operation: dict[Any, Any], meta: dict[Any, Any]) -> str:
    tags = operation.get("tags")
    first_tag = tags[0] if isinstance(tags, list) and tags else None

    group = _first_present(meta.get("group"), first_tag)
    if group is None:
        return default_group_for_path(path)
    return str(group)


def _resolve_name(
    path: str,
    method: HTTPMethod,
    operation: dict[Any, Any],
    meta: dict[Any, Any],
) -> str:
    name = _first_present(
        meta.get("name"), operation.get("summary"), operation.get("operationId")
    )
    if name is None:
        return f"{method.value.upper()} {path}"
    return str(name)


def default_group_for_path(path: str) -> str:
    """Return the first non-empty ``/``-separated segment of *path*, or ``misc``."""
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else FALLBACK_GROUP


def _first_present(*values: Any) -> Any:
    """Return the first value that is not ``None``, ``False`` or ``""``."""
    for value in values:
        if value is None or value is False or value == "":
            continue
        return value
    return None


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []
