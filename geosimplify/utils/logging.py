"""Logging utility for geosimplify"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Optional, Set

LOGGER = logging.getLogger('geosimplify')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

# Shared by every logger in the package, so a message is emitted once per process
_WARNINGS: Set[str] = set()


def warn_once(warning: str, logger: Optional[logging.Logger] = None):
    """Logs a warning (to the package LOGGER by default) only the first time it is seen"""
    if warning not in _WARNINGS:
        (logger or LOGGER).warning(warning)
        _WARNINGS.add(warning)
