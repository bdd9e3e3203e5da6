# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggableProtocol(Protocol):
    @property
    def log(self) -> logging.Logger: ...
