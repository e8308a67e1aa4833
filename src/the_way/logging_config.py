"""Logging configuration using rich handlers."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler


ENV_LOG_LEVEL = "THE_WAY_LOG_LEVEL"
ENV_LOG_FILE = "THE_WAY_LOG_FILE"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure stdlib logging with a stderr RichHandler and optional file output.

    Parameters
    ----------
    level:
        Level name such as ``"debug"``. Falls back to ``THE_WAY_LOG_LEVEL``,
        then ``"warning"``. Unknown names mean ``WARNING``.
    log_file:
        Optional path for plain-text logs. Falls back to ``THE_WAY_LOG_FILE``.
    """
    name = (level or os.getenv(ENV_LOG_LEVEL) or "warning").strip().upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    if log_file is None:
        log_file = os.getenv(ENV_LOG_FILE)

    # stdout is reserved for command output
    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
    ]
    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=numeric, handlers=handlers, format="%(message)s", force=True)


__all__ = ["setup_logging"]
