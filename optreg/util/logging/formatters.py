# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

from typing import override


class ConditionalFormatter(logging.Formatter):
    """Formatter that emits the bare message for records logged with ``extra={"simple": True}``."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)


class HandlerFilter(logging.Filter):
    """Drops records addressed to a different handler via ``extra={"handler": ...}``."""

    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name
