# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from typing import override

from ..util.config.options import DefaultOptions
from .main import ExecutionMode


class Options(DefaultOptions):
    @override
    def initialize(self) -> None:
        super().initialize()

        self.add_enum("run.mode", "mode", "m", "Execution mode", ExecutionMode, ExecutionMode.SERIAL.value)
        self.add("run.jobs", "jobs", "j", int, "Number of parallel jobs, 0 picks one per CPU", default=1)
        self.command_line.add_positional("inputs", "Input items, echoed back in the summary")
