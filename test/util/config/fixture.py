# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from collections.abc import Sequence
from typing import Any

import pytest

from optreg.config import Config, Options
from optreg.util.config.wrapper import ConfigManager


class ConfigFixture:
    def __init__(self) -> None:
        self.manager = ConfigManager(Config, Options, prog="pyoptreg.py")

    def parse(self, argv: Sequence[str]) -> Config:
        """Reset and build the configuration from a fresh command line."""
        self.manager = ConfigManager(Config, Options, prog="pyoptreg.py")
        return self.manager.initialize(argv)

    def load(self, values: dict[str, Any]) -> Config:
        self.manager.reset()
        return self.manager.load(values)

    def cleanup(self) -> None:
        self.manager.reset()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.manager, name)


@pytest.fixture
def config():
    fixture = ConfigFixture()
    yield fixture
    fixture.cleanup()
