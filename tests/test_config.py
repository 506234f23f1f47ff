"""Tests for specref.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from specref.config import build_options
from specref.exceptions import InvalidUsageError
from specref.exit_codes import EXIT_INVALID_USAGE


class TestBuildOptions:
    """Validation of the positional CLI values."""

    def test_strings_become_paths(self) -> None:
        options = build_options("spec.yaml", "out", "https://example.com", "now")
        assert options.spec_path == Path("spec.yaml")
        assert options.out_dir == Path("out")
        assert options.source_url == "https://example.com"
        assert options.generated_at == "now"
        assert options.title is None

    def test_title_kept(self) -> None:
        options = build_options("spec.yaml", "out", "u", "t", "My API")
        assert options.title == "My API"

    def test_missing_spec_path_is_usage_error(self) -> None:
        with pytest.raises(InvalidUsageError, match="Invalid arguments") as exc_info:
            build_options(None, "out", "u", "t")
        assert exc_info.value.exit_code == EXIT_INVALID_USAGE

    def test_missing_source_url_is_usage_error(self) -> None:
        with pytest.raises(InvalidUsageError):
            build_options("spec.yaml", "out", None, "t")
