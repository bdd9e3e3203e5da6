# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from enum import StrEnum

from pydantic import Field

from ..util.config import BaseConfigModel, ConfigBase


class ExecutionMode(StrEnum):
    SERIAL = "serial"
    PARALLEL = "parallel"


class RunConfig(BaseConfigModel):
    mode: ExecutionMode = Field(default=ExecutionMode.SERIAL, description="How work items are executed")
    jobs: int = Field(default=1, ge=0, description="Number of parallel jobs, 0 picks one per CPU")


# MARK: Main Config
class Config(ConfigBase):
    run: RunConfig = Field(default_factory=RunConfig, description="Run configuration")
