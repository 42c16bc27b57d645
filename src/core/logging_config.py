"""Process-wide logging setup.

Why stderr:
- stdout carries CLI output and, in server mode, the MCP stdio protocol;
  a single stray log line there would corrupt either.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

# Prevent duplicate handlers when called from both the CLI and the server.
_logging_configured = False


def setup_app_logging(settings: AppSettings | None = None) -> None:
    """Configure the root logger once: DEBUG when `settings.debug`, else INFO."""

    global _logging_configured
    if _logging_configured:
        return

    settings = settings or AppSettings()
    level = logging.DEBUG if settings.debug else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=settings.debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    # httpx logs every request at INFO; only surface it in debug mode.
    logging.getLogger("httpx").setLevel(logging.DEBUG if settings.debug else logging.WARNING)

    root.debug("Logging configured: level=%s", logging.getLevelName(level))
    _logging_configured = True
