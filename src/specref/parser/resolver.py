"""Resolve local ``$ref`` pointers one hop at a time.

OpenAPI documents use ``$ref`` objects (e.g.
``{"$ref": "#/components/parameters/Limit"}``) to share parameters,
responses and schemas. The renderer only needs to look one level through
such a pointer, so this module performs a single, non-recursive lookup
against the document root instead of inlining the whole tree.

Resolution never fails:

* external references (anything not starting with ``#/``) are returned
  unchanged,
* a pointer whose path cannot be walked is returned unchanged,
* a target that itself holds a ``$ref`` is returned as-is (single hop).

Segments are matched literally; JSON Pointer escapes (``~0``, ``~1``) are
not decoded.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_LOCAL_PREFIX = "#/"


def resolve(document: Any, node: Any) -> Any:
    """Return the target of *node* if it is a resolvable local ``$ref``.

    Args:
        document: The document root to resolve against.
        node: Any value; only mappings with a string ``$ref`` are looked up.

    Returns:
        The referenced value, or *node* itself when it is not a reference,
        the reference is external, or the path does not exist.

    Example::

        doc = {"components": {"parameters": {"Limit": {"name": "limit"}}}}
        resolve(doc, {"$ref": "#/components/parameters/Limit"})
        # -> {"name": "limit"}
    """
    if not isinstance(node, dict):
        return node
    ref = node.get("$ref")
    if not isinstance(ref, str) or not ref.startswith(_LOCAL_PREFIX):
        return node

    current: Any = document
    for segment in ref.split("/")[1:]:
        if not isinstance(current, dict):
            current = None
            break
        current = current.get(segment)

    if current is None or current is False:
        logger.debug("Unresolved reference %s", ref)
        return node
    return current


def ref_name(node: Any) -> str | None:
    """Return the last path segment of *node*'s ``$ref``, if it has one."""
    if isinstance(node, dict) and node.get("$ref"):
        return str(node["$ref"]).split("/")[-1]
    return None
