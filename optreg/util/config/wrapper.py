# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from collections.abc import Mapping, Sequence
from typing import Any

import pydantic

from ...cli import CommandLine, ParsedCommandLine
from ..helpers import script_info
from .loader import ConfigLoader
from .models import ConfigBase
from .options import OptionsBase


class ConfigManager[C: ConfigBase, O: OptionsBase]:
    """Owns the program's command line and the configuration built from it."""

    def __init__(self, config_class: type[C], options_class: type[O], *, prog: str | None = None, description: str = "") -> None:
        self.config_class = config_class
        self.command_line = CommandLine(prog=prog, description=description)
        self.options = options_class(self.command_line)
        self.parsed: ParsedCommandLine | None = None
        self.config: C | None = None

    def initialize(self, argv: Sequence[str] | None = None) -> C:
        self.parsed = self.command_line.parse_or_exit(argv)
        try:
            return self.load(self.options.values(self.parsed.applied))
        except pydantic.ValidationError as err:
            self.command_line.exit_with_error(self.describe_validation_error(err))

    def describe_validation_error(self, err: pydantic.ValidationError) -> str:
        """Describe each validation error in terms of the command-line option that supplied the value."""
        lines = []
        for error in err.errors():
            path = ".".join(str(part) for part in error["loc"])
            if (name := self.options.option_for_path(path)) is not None:
                lines.append(f"Invalid value for option '--{name}': {error['msg']}")
            else:
                lines.append(f"Invalid configuration at '{path}': {error['msg']}")
        return "\n".join(lines)

    def load(self, values: Mapping[str, Any] | C) -> C:
        if isinstance(values, self.config_class):
            self.config = values
        elif isinstance(values, Mapping):
            self.config = ConfigLoader(self.config_class).load(values)
        else:
            msg = f"Expected {self.config_class.__name__} or a mapping, got {type(values).__name__}"
            raise TypeError(msg)
        return self.config

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self.config = None
        self.parsed = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not found on the manager itself
        config = self.__dict__.get("config")
        if config is None:
            msg = f"Configuration not initialized. Call 'initialize()' before accessing '{name}'."
            raise RuntimeError(msg)
        return getattr(config, name)
