# Blades: Sparse Clifford Algebra Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Logging for the ``blades`` logger hierarchy.

Loggers come from :func:`get_logger`; the first call attaches a stderr
handler to the ``blades`` root logger.

Environment variables:
    BLADES_LOG_LEVEL: DEBUG, INFO (default), WARNING or ERROR.
    BLADES_LOG_FILE: Optional path that receives plain-text log lines.
"""

import logging
import os
import sys

ROOT = "blades"

_CONFIGURED = False

# ANSI colour codes (used only when stderr is a TTY)
_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Colours the level name; the record is restored for other handlers."""

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        levelname = record.levelname
        record.levelname = f"{_COLORS.get(record.levelno, '')}{levelname}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _level_from_env() -> int:
    name = os.environ.get("BLADES_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _configure_once() -> None:
    """Attaches handlers to the ``blades`` root logger on first use."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger(ROOT)
    root.setLevel(_level_from_env())

    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter("%(levelname)s %(name)s: %(message)s",
                                         use_color=use_color))
    root.addHandler(console)

    log_file = os.environ.get("BLADES_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``blades`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module. Names already
            inside the hierarchy are used as-is.

    Returns:
        A :class:`logging.Logger` instance.
    """
    _configure_once()
    if name == ROOT or name.startswith(ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT}.{name}")
