"""Allow ``python -m g80_layouts`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m g80_layouts`` behaves identically to the
``g80-layouts`` console script.
"""

from __future__ import annotations

from g80_layouts.cli.app import cli

if __name__ == "__main__":
    cli()
