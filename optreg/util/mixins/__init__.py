# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .loggable import LoggableMixin, LoggableProtocol


__all__ = [
    "LoggableMixin",
    "LoggableProtocol",
]
