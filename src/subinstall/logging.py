"""Logging helpers for applications using subinstall.

subinstall itself only emits records (installations at DEBUG, collision
diagnostics at WARNING on ``subinstall.diagnostics``) and never configures
logging. Applications that want readable console output for those records
can attach the Rich handler built here with `enable_console_logging`; only
the ``subinstall`` logger is touched, the host's root configuration is left
alone.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "subinstall"


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for subinstall's records.

    The handler writes to stderr. In debug mode it is set to DEBUG and shows
    the logger name plus the source file/line of each record; otherwise only
    the message is shown (Rich adds the level).

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    return handler


def enable_console_logging(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a Rich console handler to the ``subinstall`` logger.

    Calling it again replaces the handler added earlier.

    Returns:
        RichHandler: The attached handler.
    """
    project_logger = logging.getLogger(PROJECT_PREFIX)
    for existing in list(project_logger.handlers):
        if isinstance(existing, RichHandler):
            project_logger.removeHandler(existing)
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    project_logger.addHandler(handler)
    project_logger.setLevel(handler.level)
    return handler
