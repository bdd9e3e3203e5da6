# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .base_model import BaseConfigModel  # noqa: I001 otherwise we get circular import errors between .base_model and ...logging.config

from ...logging.config import LoggingConfig
from .app_info import AppInfo
from .base import ConfigBase

__all__ = [
    "AppInfo",
    "BaseConfigModel",
    "ConfigBase",
    "LoggingConfig",
]
