"""CLI application entry point for g80-layouts.

This module is the **sole error boundary** for the entire application.
It catches :class:`~g80_layouts.exceptions.G80LayoutsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  and infrastructure layers.
* The layout cache is loaded before the search and saved in a
  ``finally`` block, so layouts fetched before a failure are kept.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from g80_layouts import config
from g80_layouts.cli import exit_codes
from g80_layouts.cli.console import console
from g80_layouts.cli.logs import configure_logging
from g80_layouts.exceptions import G80LayoutsError
from g80_layouts.version import __version__

logger = logging.getLogger(__name__)

PROG = "g80-layouts"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``g80-layouts [TAGS]``      — list shared layouts, optionally by tag
    * ``g80-layouts --doctor``    — environment diagnostics
    * ``g80-layouts --version``
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List keyboard layouts shared on the Glove80 layout service.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "tags",
        nargs="*",
        help="Comma separated list of tags to search for.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug statements.",
    )
    parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=config.DEFAULT_LIMIT,
        help="How many layouts to show (default: %(default)s).",
    )
    parser.add_argument(
        "--offset",
        type=_non_negative_int,
        default=config.DEFAULT_OFFSET,
        help="How many layouts to skip (default: %(default)s).",
    )
    parser.add_argument(
        "--redupe",
        action="store_true",
        help="Show layouts with the same title by the same creator.",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip layouts that cannot be fetched instead of aborting.",
    )
    parser.add_argument(
        "--cache-file",
        default=None,
        metavar="PATH",
        help=f"Layout cache location (default: {config.CACHE_FILE_NAME} in the user cache directory).",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the environment and the layout cache, then exit.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(args: argparse.Namespace) -> int:
    """Search, resolve, deduplicate and render layouts.

    Flow:
    1. Load the layout cache.
    2. Fetch the id list for the tag filter.
    3. Apply the ``--offset``/``--limit`` window.
    4. Resolve each id (cache hit or one request).
    5. Collapse duplicates unless ``--redupe``.
    6. Render the table, then save the cache if anything was fetched.
    """
    from g80_layouts.cli.layout_table import render_layouts
    from g80_layouts.core.dedupe import deduplicate_layouts
    from g80_layouts.core.layout_service import LayoutService
    from g80_layouts.core.query import normalize_tags, select_window
    from g80_layouts.infra.cache_file import load_store, save_store
    from g80_layouts.infra.moergo_api import MoErgoLayoutSource

    cache_path = config.default_cache_path(args.cache_file)
    store = load_store(cache_path)
    tags = normalize_tags(args.tags[0] if args.tags else None)

    try:
        with MoErgoLayoutSource() as source:
            service = LayoutService(source, store)
            layout_ids = service.search(tags)
            logger.debug("Search returned %d layout ids", len(layout_ids))
            window = select_window(layout_ids, args.offset, args.limit)
            records = service.resolve_many(window, skip_errors=args.skip_errors)
        render_layouts(deduplicate_layouts(records, redupe=args.redupe))
    finally:
        if store.dirty:
            save_store(store, cache_path)
        else:
            logger.debug("Layout cache unchanged, not rewriting %s", cache_path)

    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from g80_layouts.cli.doctor import run_doctor

    return run_doctor(config.default_cache_path(args.cache_file))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the g80-layouts CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.tags) > 1:
        parser.error(
            f"{PROG} only takes 1 argument at most "
            "(a comma separated list of tags to search for)"
        )

    configure_logging(args.debug)

    if args.doctor:
        return _handle_doctor(args)

    return _handle_list(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except G80LayoutsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
