# topmark:header:start
#
#   project      : YamlCraft
#   file         : logging.py
#   file_relpath : src/yamlcraft/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging helpers for YamlCraft.

Registers a TRACE level below DEBUG and a logger class exposing `trace()`.
The encoder modules log at TRACE/DEBUG only. Handlers are installed by
`setup_logging`, which the CLI calls; library users configure logging themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from yamlcraft.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class YamlcraftLogger(logging.Logger):
    """Logger with an extra `trace` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(YamlcraftLogger)


# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter colouring each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colour the text by its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The formatted text wrapped in the level's chalk style.
        """
        text: str = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(text)


_LEVEL_ALIASES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``YAMLCRAFT_LOG_LEVEL``.

    Accepts standard level names in any case, ``TRACE`` and plain integers.
    Returns None when the variable is unset, empty or unrecognised.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    if raw in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[raw]
    # getLevelName maps a known name to its number and echoes unknown text back
    level: int | str = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stderr handler on the root logger.

    Args:
        level (int | None): Level to apply. When None, `resolve_env_log_level`
            decides, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    # stdout carries the rendered YAML
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> YamlcraftLogger:
    """Return the `YamlcraftLogger` called ``name``."""
    return cast("YamlcraftLogger", logging.getLogger(name))
