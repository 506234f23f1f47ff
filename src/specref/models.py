"""Canonical Pydantic models shared across all specref modules.

This is the single source of truth for data shapes in the project. The
models fall into three groups:

**Invocation models** -- built from the command line:
    :class:`RenderOptions`.

**Parser output models** -- produced by :mod:`specref.parser` and consumed
by the generator:
    :class:`HTTPMethod`, :class:`DocumentInfo`, :class:`OperationRecord`.

**Generator models** -- grouped records and the pre-formatted views the
Markdown templates lay out:
    :class:`OperationGroup`, :class:`ExampleView`, :class:`OperationView`,
    :class:`GenerationResult`.

The document tree itself stays a plain ``dict``/``list``/scalar structure
as returned by the YAML parser; only the derived records are modelled.
Parser output models are frozen because nothing downstream mutates them.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Invocation ---


class RenderOptions(BaseModel):
    """Everything a single run needs, as passed on the command line.

    See Also:
        :func:`~specref.config.build_options`: Builds and checks an instance.
    """

    spec_path: Path = Field(description="OpenAPI document to read (YAML or JSON)")
    out_dir: Path = Field(description="Directory receiving index.md and groups/")
    source_url: str = Field(description="URL printed on every page as Source:")
    generated_at: str = Field(description="Timestamp printed on every page as Generated:")
    title: Optional[str] = Field(
        default=None, description="Index heading; falls back to info.title"
    )


# --- Parser Output Models ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised as operation keys inside a path item.

    Declaration order is the order in which a path item is scanned.
    """

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    PATCH = "patch"
    OPTIONS = "options"
    HEAD = "head"
    TRACE = "trace"


class DocumentInfo(BaseModel):
    """Header fields read from the root of the document."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    openapi_version: Optional[str] = None
    api_version: Optional[str] = None


class OperationRecord(BaseModel):
    """One path + HTTP method pair, flattened for rendering.

    ``operation`` and ``meta`` are the raw mappings from the document;
    ``params`` is the de-duplicated union of path-level and operation-level
    parameter entries, which may still be ``$ref`` objects.
    """

    model_config = ConfigDict(frozen=True)

    group: str
    name: str
    method: HTTPMethod
    path: str
    operation: dict[Any, Any] = Field(default_factory=dict)
    meta: dict[Any, Any] = Field(default_factory=dict, description="x-oaiMeta")
    params: list[Any] = Field(default_factory=list)


# --- Generator Models ---


class OperationGroup(BaseModel):
    """A bucket of operations rendered as a single ``groups/<slug>.md`` page."""

    key: str
    slug: str
    title: str
    operations: list[OperationRecord] = Field(default_factory=list)


class ExampleView(BaseModel):
    """A fenced code block under an operation's Examples heading."""

    label: str
    language: str
    code: str


class OperationView(BaseModel):
    """Pre-formatted text for one operation section of a group page.

    Every field is already a final Markdown fragment; the template only
    decides where blank lines go.
    """

    name: str
    method: str
    path: str
    summary: str = ""
    description: str = ""
    deprecated: bool = False
    beta: bool = False
    returns: str = ""
    parameters: list[str] = Field(default_factory=list)
    request_body: list[str] = Field(default_factory=list)
    responses: list[str] = Field(default_factory=list)
    request_examples: list[ExampleView] = Field(default_factory=list)
    response_example: Optional[str] = None

    @property
    def has_examples(self) -> bool:
        return bool(self.request_examples) or self.response_example is not None


class GenerationResult(BaseModel):
    """Summary of a completed run, returned by :func:`~specref.generator.generate_reference`."""

    index_path: Path
    group_paths: list[Path] = Field(default_factory=list)
    operation_count: int = 0
