# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

from typing import Any, override

from .loggable_protocol import LoggableProtocol


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler == "tty":
            return self.isEnabledForTty(level)
        if handler == "file":
            return self.isEnabledForFile(level)

        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def _handler_allows(self, handler: logging.Handler | None, level: int) -> bool:
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        return self._handler_allows(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        return self._handler_allows(LoggingManager().fh, level)


logging.setLoggerClass(Logger)


_original_getLogger = logging.getLogger  # noqa: N816


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802 matches logging.getLogger
    """Return the logger for ``obj``, named after it (or its class), optionally as a child of ``parent``."""
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = _original_getLogger(name)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)
    return logger
