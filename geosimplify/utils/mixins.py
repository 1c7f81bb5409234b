"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional

from geosimplify.utils.logging import warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives the inheriting class a logger named ``<module>.<ClassName>``.

    Loggers created inside the geosimplify package are children of the package
    LOGGER, so they share its handler and level.
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        module_name = _class.__module__
        classname = _class.__name__
        if logstr:
            classname += f'.{logstr}'

        logstr = f"{classname}" if module_name == "builtins" else f"{module_name}.{classname}"

        self.logger = logging.getLogger(logstr)

    def warn_once(self, msg: str):
        """Logs a warning through this class's logger only once per message, package-wide"""
        warn_once(msg, self.logger)
