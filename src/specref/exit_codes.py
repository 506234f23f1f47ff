"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specref.exceptions.SpecrefError` subclass.
Shell wrappers can inspect the exit code to tell a bad invocation from a
broken input document or an unwritable output directory.

Example::

    $ specref broken.yaml out https://example.com/spec.yaml now
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the document could not be parsed
"""

EXIT_SUCCESS = 0
"""The reference pages were written successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with missing or invalid arguments."""

EXIT_SPEC_PARSE_ERROR = 7
"""The OpenAPI document could not be parsed."""

EXIT_FILESYSTEM_ERROR = 8
"""The input could not be read or the output could not be written."""

EXIT_INTERRUPTED = 130
"""The run was cancelled with Ctrl-C."""
