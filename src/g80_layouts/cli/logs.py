"""Logging configuration for the CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers;
this is the one place that attaches a handler.  Without ``--debug``
only warnings (failed cache writes, skipped layouts) are shown.
"""

from __future__ import annotations

import logging

_PACKAGE_LOGGER = "g80_layouts"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain one without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler

    from g80_layouts.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling it again replaces the previous handler, so tests can call
    it repeatedly.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
