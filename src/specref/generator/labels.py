"""One-line labels for schema nodes.

Labels are shown inline next to parameters, request content types and
response content types, e.g. ``array of string`` or
``object{id, name}``. They summarise a schema; they never describe it in
full.
"""

from __future__ import annotations

from typing import Any

_COMPOSITION_KEYS = ("oneOf", "anyOf", "allOf")


def schema_label(schema: Any) -> str:
    """Return a short label for *schema*, or ``""`` when nothing applies.

    The first matching rule wins:

    1. not a mapping -- ``""``
    2. ``$ref`` -- ``ref: <last pointer segment>``
    3. ``oneOf`` / ``anyOf`` / ``allOf`` (checked in that order) --
       ``oneOf: a, b`` from the labels of the members, or the bare keyword
       when no member has a label
    4. ``type: array`` -- ``array of <items label>`` or ``array``
    5. ``type: object`` with properties -- ``object{a, b}``
    6. any other ``type`` -- the type itself
    7. otherwise -- ``""``

    Example::

        schema_label({"type": "array", "items": {"type": "string"}})
        # "array of string"
    """
    if not isinstance(schema, dict):
        return ""

    ref = schema.get("$ref")
    if ref:
        return f"ref: {str(ref).split('/')[-1]}"

    for keyword in _COMPOSITION_KEYS:
        members = schema.get(keyword)
        if members is None or members is False:
            continue
        labels = [schema_label(member) for member in _members(members)]
        labels = [label for label in labels if label]
        return f"{keyword}: {', '.join(labels)}" if labels else keyword

    schema_type = schema.get("type")
    if schema_type is None or schema_type is False:
        return ""

    if schema_type == "array":
        item = schema_label(schema.get("items"))
        return f"array of {item}" if item else "array"

    if schema_type == "object":
        properties = schema.get("properties")
        if isinstance(properties, dict) and properties:
            return "object{" + ", ".join(str(name) for name in properties) + "}"

    return _type_text(schema_type)


def _members(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return list(value.values())
    return []


def _type_text(schema_type: Any) -> str:
    # OpenAPI 3.1 allows a list of types, e.g. ["string", "null"].
    if isinstance(schema_type, list):
        return ", ".join(str(item) for item in schema_type)
    return str(schema_type)
