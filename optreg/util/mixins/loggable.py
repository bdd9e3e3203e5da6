# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from typing import override

from ..logging import LoggableProtocol, Logger, getLogger


class LoggableMixin:
    """Mixin that adds a lazily created ``.log`` logger to a class.

    The logger is named after ``instance_name`` when the object has one, otherwise after its class. When the object
    exposes a loggable ``log_parent``, the logger becomes a child of the parent's logger.
    """

    instance_name: str | None = None
    log_parent: LoggableProtocol | None = None

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._log: Logger | None = None

    @property
    def log(self) -> Logger:
        log = getattr(self, "_log", None)
        if log is None:
            log = self._log = getLogger(self.__log_name__, parent=self.log_parent)
        return log

    @property
    def __log_name__(self) -> str:
        return self.instance_name or type(self).__name__

    @override
    def __repr__(self) -> str:
        name = self.__log_name__
        cls_name = type(self).__name__
        return f"<{name}>" if name == cls_name else f"<{cls_name} {name}>"
