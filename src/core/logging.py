"""Logging helpers for the CLI and adapters.

Project modules log through ``logging.getLogger(__name__)``; this module only
wires the console handler (Rich, on stderr) so the core stays free of any
presentation concern.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIXES = ("core", "adapters", "cli")


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix like ``[httpx]``."""

    def filter(self, record: logging.LogRecord) -> bool:
        root = record.name.split(".")[0]
        record.prefix = "" if root in PROJECT_PREFIXES else f"[{root}]"
        return True


def build_console_handler(level: int = logging.WARNING, debug_mode: bool = False) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the level is forced to DEBUG and source paths are shown.
    """

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
    )
    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: int | str = logging.WARNING, debug_mode: bool = False) -> RichHandler:
    """Attach a single console handler to the root logger.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)

    handler = build_console_handler(level, debug_mode)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug_mode else level)
    return handler
