"""``g80-layouts --doctor`` — environment diagnostics.

Gathers system information and renders a table summarising whether
the runtime environment and the layout cache are usable.  No business
logic resides here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from g80_layouts import config
from g80_layouts.cli import exit_codes
from g80_layouts.cli.console import console
from g80_layouts.infra.cache_file import describe_cache
from g80_layouts.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    py_version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", py_version, status


def _requests_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the requests row."""
    try:
        import requests
    except ImportError:
        return "requests", "NOT INSTALLED", _FAIL
    return "requests", getattr(requests, "__version__", "unknown"), _OK


def _rich_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.  Rich is optional."""
    try:
        return "rich", version("rich"), _OK
    except PackageNotFoundError:
        return "rich", "NOT INSTALLED", _WARN


def _cache_check(cache_path: Path) -> tuple[str, str, str]:
    """Return (label, value, status) for the cache file row."""
    healthy, description = describe_cache(cache_path)
    status = _OK if healthy else _FAIL
    return "cache", f"{cache_path} ({description})", status


def _service_check() -> tuple[str, str, str]:
    return "service", config.BASE_URL, _OK


def _g80_layouts_version_check() -> tuple[str, str, str]:
    return "g80-layouts", __version__, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ng80-layouts doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(cache_path: Path) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _g80_layouts_version_check(),
        _python_version_check(),
        _requests_version_check(),
        _rich_version_check(),
        _cache_check(cache_path),
        _service_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="g80-layouts doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        console.print()
        console.print(table)
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
