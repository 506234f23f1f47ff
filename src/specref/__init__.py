"""specref -- Render OpenAPI specifications as Markdown reference pages.

This package reads an OpenAPI document (YAML or JSON), flattens every
path + method pair into an operation record, buckets the records into
groups, and writes one Markdown page per group plus an ``index.md``
linking them together.

Typical workflow::

    specref openapi.yaml docs/api https://example.com/openapi.yaml 2024-05-01

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    config: Output layout constants and invocation options.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stderr diagnostics with Rich support.
"""

__version__ = "0.1.0"
