"""Shared test fixtures for specref.

Provides reusable fixtures for loading fixture documents, building render
options pointed at a temporary output directory, resetting global output
state, and running the CLI. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from specref.config import build_options
from specref.models import RenderOptions
from specref.output import reset_output
from specref.parser import load_document


FIXTURES_DIR = Path(__file__).parent / "fixtures"

SOURCE_URL = "https://example.com/openapi.yaml"
GENERATED_AT = "2024-05-01T00:00:00Z"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager binds its Rich console to sys.stderr at creation
    time. When Typer's CliRunner swaps the stream and the test finishes,
    the cached reference goes stale, so a fresh manager is forced.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def assistants_doc() -> dict[str, Any]:
    """Raw assistants.yaml document (x-oaiMeta, $refs, anchors)."""
    return load_document(FIXTURES_DIR / "assistants.yaml")


@pytest.fixture
def petstore_doc() -> dict[str, Any]:
    """Raw petstore.json document."""
    return load_document(FIXTURES_DIR / "petstore.json")


# ---------------------------------------------------------------------------
# Options fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_options(tmp_path: Path) -> Callable[..., RenderOptions]:
    """Factory for RenderOptions writing under ``tmp_path / "out"``.

    Accepts a fixture file name or an absolute path for the spec and an
    optional title.
    """

    def _make(spec: str | Path, title: str | None = None) -> RenderOptions:
        spec_path = Path(spec)
        if not spec_path.is_absolute():
            spec_path = FIXTURES_DIR / spec_path
        return build_options(spec_path, tmp_path / "out", SOURCE_URL, GENERATED_AT, title)

    return _make


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write *content* to ``tmp_path / name`` and return the path."""

    def _write(content: str, name: str = "spec.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args() -> Callable[..., list[str]]:
    """Factory for the positional CLI arguments.

    ``cli_args("widgets.yaml", out)`` gives the spec path, output directory,
    source URL and timestamp; extra values (e.g. a title) are appended.
    Relative spec names are looked up in ``tests/fixtures``.
    """

    def _make(spec: str | Path, out: str | Path, *extra: str) -> list[str]:
        spec_path = Path(spec)
        if not spec_path.is_absolute():
            spec_path = FIXTURES_DIR / spec_path
        return [str(spec_path), str(out), SOURCE_URL, GENERATED_AT, *extra]

    return _make
