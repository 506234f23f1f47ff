"""Typer application and CLI entry point for specref.

The CLI takes four required positional values -- the OpenAPI document, the
output directory, the source URL and the generation timestamp -- plus an
optional index title::

    specref SPEC_PATH OUT_DIR SOURCE_URL GENERATED_AT [TITLE]

Missing positionals are reported by Typer as a usage error (exit 2).
:class:`~specref.exceptions.SpecrefError` failures are printed on stderr
and mapped to their exit codes; see :mod:`specref.exit_codes`.

See Also:
    :func:`specref.generator.generate_reference`: The pipeline this wraps.
    :mod:`specref.output`: stderr diagnostics initialised in :func:`generate`.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any, Optional

import typer

from specref import __version__
from specref.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="specref",
    help="Render an OpenAPI specification as Markdown reference pages.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"specref {__version__}")
        raise typer.Exit()


@app.command()
def generate(
    spec_path: str = typer.Argument(
        ..., metavar="SPEC_PATH", help="OpenAPI document (YAML or JSON)."
    ),
    out_dir: str = typer.Argument(
        ..., metavar="OUT_DIR", help="Directory to write index.md and groups/ into."
    ),
    source_url: str = typer.Argument(
        ..., metavar="SOURCE_URL", help="URL shown as the Source: line."
    ),
    generated_at: str = typer.Argument(
        ..., metavar="GENERATED_AT", help="Timestamp shown as the Generated: line."
    ),
    title: Optional[str] = typer.Argument(
        None, metavar="[TITLE]", help="Index heading. Defaults to info.title."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Write index.md plus one groups/<slug>.md page per API group.

    Args:
        spec_path: Path to the OpenAPI document.
        out_dir: Output directory; created if missing, files overwritten.
        source_url: Text for every page's ``Source:`` line.
        generated_at: Text for every page's ``Generated:`` line.
        title: Optional index heading.
        version: If ``True``, print the version string and exit.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress informational output.
        verbose: Enable debug output.

    Raises:
        typer.Exit: With the failing error's exit code.
    """
    from specref.config import build_options
    from specref.exceptions import SpecrefError
    from specref.generator import generate_reference
    from specref.output import OutputManager, debug, error, set_output, success

    output = OutputManager(no_color=no_color, quiet=quiet, verbose=verbose)
    set_output(output)
    output.configure_logging()

    try:
        options = build_options(spec_path, out_dir, source_url, generated_at, title)
        debug(f"Reading {options.spec_path}")
        result = generate_reference(options)
    except SpecrefError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    success(
        f"Wrote {result.operation_count} operations in "
        f"{len(result.group_paths)} groups to {options.out_dir}"
    )


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``specref`` console script.

    Unhandled :class:`~specref.exceptions.SpecrefError` instances cause a
    clean exit with the error's ``exit_code``. Any other exception is
    reported as an unexpected error and exits with
    :data:`~specref.exit_codes.EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from specref.exceptions import SpecrefError
        from specref.output import error

        if isinstance(exc, SpecrefError):
            error(str(exc))
            sys.exit(exc.exit_code)
        logger.debug("Unhandled exception", exc_info=True)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
