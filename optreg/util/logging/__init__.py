# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

# Exception Handler
from . import exception_handler

# Loggable Protocol
from .loggable_protocol import LoggableProtocol

# Logger / getLogger
from .logger import Logger, getLogger


__all__ = [
    "LoggableProtocol",
    "Logger",
    "exception_handler",
    "getLogger",
]
