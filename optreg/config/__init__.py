# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from ..util.config.wrapper import ConfigManager
from .main import Config, ExecutionMode, RunConfig
from .options import Options


# Export configuration wrapper
CFG = ConfigManager(Config, Options, description="Parse options into typed variables and print the result")


__all__ = [
    "CFG",
    "Config",
    "ExecutionMode",
    "Options",
    "RunConfig",
]
