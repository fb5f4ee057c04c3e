"""Logging helpers for graphwalker.

Library code only emits DEBUG records on the ``graphwalker`` logger; nothing
is printed unless the embedding application calls ``configure_logging``.
"""

from __future__ import annotations

import datetime
import logging
import os

from rich.console import Console
from rich.text import Text

from ..config import GRAPHWALKER_CONFIG

LOGGER_NAME = "graphwalker"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _GraphWalkerRichConsoleHandler(logging.Handler):
    def __init__(self, level: int = logging.NOTSET, console: Console | None = None) -> None:
        super().__init__(level)
        self._console = console or Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        filename = os.path.basename(record.pathname)
        return f"[{filename}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        action_color = getattr(record, "graphwalker_action_color", None)
        if not action_color:
            return Text(message)
        action, sep, rest = message.partition(" ")
        text = Text()
        text.append(action, style=action_color)
        if sep:
            text.append(sep + rest)
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stamp = datetime.datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            line = Text()
            line.append(f"[{stamp}] ", style="dim")
            line.append(
                f"{record.levelname:<8}",
                style=_LEVEL_STYLES.get(record.levelname, ""),
            )
            line.append(" ")
            line.append_text(self._format_message_text(record))
            line.append(" ")
            line.append(self._format_location(record), style="dim")
            self._console.print(line, highlight=False, soft_wrap=True)
            if record.exc_info:
                self._console.print(
                    Text(logging.Formatter().formatException(record.exc_info)),
                    highlight=False,
                )
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(
    level: int | str | None = None,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Attach the rich console handler to the ``graphwalker`` logger.

    Safe to call repeatedly; at most one console handler is installed and
    later calls only update the level.
    """

    logger = get_logger()
    resolved = GRAPHWALKER_CONFIG.log_level if level is None else level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(isinstance(h, _GraphWalkerRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_GraphWalkerRichConsoleHandler(console=console))
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
