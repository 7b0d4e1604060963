"""Logging helpers for the flappy namespace."""
from __future__ import annotations

import logging
import sys
from datetime import datetime

ROOT = "flappy"


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",
        "INFO": "\033[36m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = True) -> None:
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name.removeprefix(f"{ROOT}.")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if not self._color:
            return line
        return f"{self.COLORS.get(record.levelname, '')}{line}{self.RESET}"


def setup_logging(level: str = "info", color: bool | None = None) -> None:
    """Configure the flappy root logger with a single stderr handler."""
    root = logging.getLogger(ROOT)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    if color is None:
        color = sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter(color=color))
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the flappy namespace."""
    return logging.getLogger(f"{ROOT}.{name}")
