# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

# Only the models are exported here, the option and manager modules depend on optreg.cli and are imported directly
from .models import AppInfo, BaseConfigModel, ConfigBase, LoggingConfig


__all__ = [
    "AppInfo",
    "BaseConfigModel",
    "ConfigBase",
    "LoggingConfig",
]
