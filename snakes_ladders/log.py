"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging
import sys

import coloredlogs

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)7s | %(message)s"


def setup(verbose: bool = False) -> logging.Logger:
    """Install coloured console logging on the package logger."""
    root_log = logging.getLogger("snakes_ladders")
    level = logging.DEBUG if verbose else logging.WARNING
    coloredlogs.install(level=level, logger=root_log, stream=sys.stderr, fmt=LOG_FORMAT)
    root_log.setLevel(level)
    return root_log
