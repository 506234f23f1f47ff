"""Output layout constants and invocation options.

specref keeps no configuration files and reads no environment variables
of its own: a run is fully described by its command-line arguments,
gathered into a :class:`~specref.models.RenderOptions` by
:func:`build_options`. The fixed parts of the output layout live here so
the generator and the tests agree on them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from specref.exceptions import InvalidUsageError
from specref.models import RenderOptions

INDEX_FILENAME = "index.md"
GROUPS_DIRNAME = "groups"

DEFAULT_TITLE = "OpenAPI reference"
"""Index heading used when neither the CLI nor ``info.title`` supplies one."""

FALLBACK_GROUP = "misc"
"""Group key for paths without segments, and slug for names that normalise to nothing."""

EXAMPLE_LANGUAGES: dict[str, str] = {
    "curl": "bash",
    "python": "python",
    "node.js": "javascript",
    "javascript": "javascript",
}
"""Fence language per ``x-oaiMeta.examples.request`` label."""

DEFAULT_EXAMPLE_LANGUAGE = "text"
RESPONSE_EXAMPLE_LANGUAGE = "json"


def build_options(
    spec_path: str | Path,
    out_dir: str | Path,
    source_url: str,
    generated_at: str,
    title: Optional[str] = None,
) -> RenderOptions:
    """Validate the positional CLI values into a :class:`RenderOptions`.

    Args:
        spec_path: Path to the OpenAPI document.
        out_dir: Output directory (created on demand).
        source_url: Text for the ``Source:`` line.
        generated_at: Text for the ``Generated:`` line.
        title: Optional index heading.

    Returns:
        The validated options.

    Raises:
        InvalidUsageError: If a value is missing or of the wrong type.
    """
    try:
        return RenderOptions(
            spec_path=spec_path,
            out_dir=out_dir,
            source_url=source_url,
            generated_at=generated_at,
            title=title,
        )
    except ValidationError as exc:
        raise InvalidUsageError(f"Invalid arguments: {exc}") from exc
