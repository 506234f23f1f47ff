"""Render grouped operations as Markdown reference pages.

This module is the last stage of the pipeline. It takes the raw document
and its :class:`~specref.models.OperationGroup` list and writes:

* ``index.md`` -- title, source/generation lines, optional OpenAPI and API
  versions, and a link per group with its operation count.
* ``groups/<slug>.md`` -- one page per group with a section per
  operation: method and path, summary and description, flags, parameters,
  request body, responses and vendor examples.

The generation process:

1. Each :class:`~specref.models.OperationRecord` is turned into an
   :class:`~specref.models.OperationView` whose fields are final Markdown
   lines (references resolved, schemas labelled).
2. A Jinja2 environment renders ``index.md.j2`` and ``group.md.j2`` from
   ``generator/templates/``; the templates only place lines and blank
   lines.
3. Directories are created as needed and every file is overwritten.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from specref.config import (
    DEFAULT_EXAMPLE_LANGUAGE,
    DEFAULT_TITLE,
    EXAMPLE_LANGUAGES,
    GROUPS_DIRNAME,
    INDEX_FILENAME,
)
from specref.exceptions import OutputWriteError
from specref.generator.labels import schema_label
from specref.models import (
    DocumentInfo,
    ExampleView,
    GenerationResult,
    OperationGroup,
    OperationRecord,
    OperationView,
    RenderOptions,
)
from specref.parser.resolver import ref_name, resolve

logger = logging.getLogger(__name__)


def render_reference(
    document: dict[Any, Any],
    info: DocumentInfo,
    groups: list[OperationGroup],
    options: RenderOptions,
) -> GenerationResult:
    """Write ``index.md`` and one page per group under ``options.out_dir``.

    Groups are written in the order given; when two groups share a slug
    the later one overwrites the earlier page.

    Args:
        document: The raw document root, used to resolve ``$ref`` pointers.
        info: Header fields for the index page.
        groups: Groups from :func:`~specref.generator.grouping.group_operations`.
        options: Output directory plus the Source/Generated/title values.

    Returns:
        A :class:`~specref.models.GenerationResult` listing the files written.

    Raises:
        OutputWriteError: If a directory or file cannot be written.
    """
    out_dir = Path(options.out_dir)
    groups_dir = out_dir / GROUPS_DIRNAME
    try:
        groups_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Cannot create output directory {groups_dir}: {exc}") from exc

    env = _create_jinja_env()

    index_path = out_dir / INDEX_FILENAME
    _write(
        index_path,
        env.get_template("index.md.j2").render(
            title=options.title or info.title or DEFAULT_TITLE,
            source_url=options.source_url,
            generated_at=options.generated_at,
            openapi_version=info.openapi_version,
            api_version=info.api_version,
            groups_dir=GROUPS_DIRNAME,
            groups=groups,
        ),
    )

    group_template = env.get_template("group.md.j2")
    group_paths: list[Path] = []
    written_by: dict[str, str] = {}
    for group in groups:
        if group.slug in written_by:
            logger.warning(
                "Groups %r and %r share slug %r; %s.md is overwritten",
                written_by[group.slug],
                group.key,
                group.slug,
                group.slug,
            )
        written_by[group.slug] = group.key

        page_path = groups_dir / f"{group.slug}.md"
        _write(
            page_path,
            group_template.render(
                title=group.title,
                source_url=options.source_url,
                generated_at=options.generated_at,
                operations=[build_operation_view(document, record) for record in group.operations],
            ),
        )
        if page_path not in group_paths:
            group_paths.append(page_path)

    return GenerationResult(
        index_path=index_path,
        group_paths=group_paths,
        operation_count=sum(len(group.operations) for group in groups),
    )


def build_operation_view(document: dict[Any, Any], record: OperationRecord) -> OperationView:
    """Pre-format every line of one operation's section.

    Args:
        document: The raw document root, used to resolve ``$ref`` pointers.
        record: The operation to describe.

    Returns:
        The view consumed by ``group.md.j2``.
    """
    operation = record.operation
    meta = record.meta
    request_examples, response_example = _examples(meta.get("examples"))

    return OperationView(
        name=record.name,
        method=record.method.value.upper(),
        path=record.path,
        summary=_text(operation.get("summary")),
        description=_text(operation.get("description")),
        deprecated=bool(operation.get("deprecated")),
        beta=bool(meta.get("beta")),
        returns=_text(meta.get("returns")),
        parameters=[_parameter_line(document, param) for param in record.params],
        request_body=_request_body_lines(document, operation.get("requestBody")),
        responses=_response_lines(document, operation.get("responses")),
        request_examples=request_examples,
        response_example=response_example,
    )


def _parameter_line(document: dict[Any, Any], param: Any) -> str:
    """Format one parameter bullet: name, location, requiredness, schema, description."""
    resolved = _mapping(resolve(document, param))

    name = resolved.get("name")
    if name is None or name is False:
        name = ref_name(param) or "unknown"
    location = resolved.get("in") or "unknown"
    required = "required" if resolved.get("required") else "optional"
    label = schema_label(resolved.get("schema"))
    description = _text(resolved.get("description"))

    line = f"- `{name}` ({location}, {required})"
    if label:
        line += f" `{label}`"
    if description:
        line += f": {description}"
    return line


def _request_body_lines(document: dict[Any, Any], request_body: Any) -> list[str]:
    if request_body is None or request_body is False:
        return []
    content = _mapping(_mapping(resolve(document, request_body)).get("content"))

    lines = []
    for content_type, media in content.items():
        label = _content_label(document, media)
        line = f"- `{content_type}`"
        if label:
            line += f" `{label}`"
        lines.append(line)
    return lines


def _response_lines(document: dict[Any, Any], responses: Any) -> list[str]:
    """Format one bullet per status code, sorted by the code as a string."""
    responses = _mapping(responses)

    lines = []
    for status in sorted(responses, key=str):
        response = _mapping(resolve(document, responses[status]))
        line = f"- `{status}`"

        description = _text(response.get("description"))
        if description:
            line += f": {description}"

        content = _mapping(response.get("content"))
        if content:
            entries = []
            for content_type, media in content.items():
                label = _content_label(document, media)
                entries.append(f"`{content_type}` ({label})" if label else f"`{content_type}`")
            line += f" ({', '.join(entries)})"

        lines.append(line)
    return lines


def _content_label(document: dict[Any, Any], media: Any) -> str:
    """Label the schema of a media-type object, looking one hop through ``$ref``."""
    schema = _mapping(media).get("schema") or {}
    return schema_label(resolve(document, schema))


def _examples(examples: Any) -> tuple[list[ExampleView], str | None]:
    """Split ``x-oaiMeta.examples`` into request code blocks and a response body.

    A mapping provides ``request`` (a label -> code mapping, or a single
    code string) and ``response``; any other value is the response body.
    """
    if examples is None or examples is False:
        return [], None

    if isinstance(examples, dict):
        request = examples.get("request")
        response = examples.get("response")
    else:
        request, response = None, examples

    request_views: list[ExampleView] = []
    if isinstance(request, dict):
        for label, code in request.items():
            label = str(label)
            request_views.append(
                ExampleView(
                    label=label,
                    language=EXAMPLE_LANGUAGES.get(label, DEFAULT_EXAMPLE_LANGUAGE),
                    code=_code(code),
                )
            )
    elif request is not None and request is not False:
        request_views.append(
            ExampleView(label="request", language=DEFAULT_EXAMPLE_LANGUAGE, code=_code(request))
        )

    if response is None or response is False:
        return request_views, None
    return request_views, _code(response)


def _code(value: Any) -> str:
    """Render an example payload as text with trailing whitespace removed.

    Strings are used verbatim; anything else is serialised as JSON.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return value.rstrip()


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _mapping(value: Any) -> dict[Any, Any]:
    return value if isinstance(value, dict) else {}


def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for the Markdown templates.

    Autoescape is disabled for ``.md.j2`` files (they produce Markdown,
    not HTML). Block trimming and lstrip keep control tags off the output.
    """
    return Environment(
        loader=PackageLoader("specref.generator", "templates"),
        autoescape=select_autoescape(disabled_extensions=("md.j2",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)
