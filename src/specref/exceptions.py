"""Exception hierarchy for specref.

All exceptions inherit from :class:`SpecrefError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specref.exit_codes`.
The top-level handler in :func:`specref.app.main` catches ``SpecrefError``
and exits with the appropriate code.

Subclass hierarchy::

    SpecrefError (exit 1)
    +-- InvalidUsageError  (exit 2)
    +-- SpecParseError     (exit 7)
    +-- SpecFileError      (exit 8)
    +-- OutputWriteError   (exit 8)
"""

from specref.exit_codes import (
    EXIT_FILESYSTEM_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class SpecrefError(Exception):
    """Base exception for all specref errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specref.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SpecrefError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(SpecrefError):
    """Raised when the input document is not valid YAML/JSON or uses a disallowed tag."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class SpecFileError(SpecrefError):
    """Raised when the input document cannot be read from disk."""

    exit_code = EXIT_FILESYSTEM_ERROR


class OutputWriteError(SpecrefError):
    """Raised when an output directory or Markdown file cannot be written."""

    exit_code = EXIT_FILESYSTEM_ERROR
