# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Program options, declared on a :class:`~optreg.cli.CommandLine` and keyed by the config path they fill."""

import enum
import pathlib

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, override

from ...cli import CommandLine
from ...registry import OptionInfo, ValueSlot
from ..logging.levels import LoggingLevel


LEVEL_HELP = "One of the logging levels, any unambiguous prefix is accepted"


class OptionsBase(metaclass=ABCMeta):
    def __init__(self, command_line: CommandLine) -> None:
        self.command_line = command_line
        self.bound: dict[str, tuple[str, ValueSlot[Any]]] = {}
        self.initialize()

    @abstractmethod
    def initialize(self) -> None:
        msg = "Subclasses must implement the 'initialize' method."
        raise NotImplementedError(msg)

    def add(self, path: str, name: str, short_name: str, value_type: type, description: str, default: Any = None) -> OptionInfo:
        slot = ValueSlot(value_type, default)
        self.bound[name] = (path, slot)
        return self.command_line.add_option(slot, name, short_name, description)

    def add_enum(
        self,
        path: str,
        name: str,
        short_name: str,
        description: str,
        choices: Iterable[tuple[str, Any]] | Mapping[str, Any] | type[enum.Enum],
        default: str,
    ) -> OptionInfo:
        slot = ValueSlot(object)
        self.bound[name] = (path, slot)
        return self.command_line.add_enum_option(slot, name, short_name, description, choices, default)

    def option_for_path(self, path: str) -> str | None:
        """Name of the option that fills config path ``path`` or one of its parents."""
        for name, (bound_path, _) in self.bound.items():
            if path == bound_path or path.startswith(f"{bound_path}."):
                return name
        return None

    def values(self, applied: Iterable[str]) -> dict[str, Any]:
        """Map config paths to the values of the options that were given on the command line."""
        result: dict[str, Any] = {}
        for name in applied:
            if (entry := self.bound.get(name)) is None:
                continue
            path, slot = entry
            result[path] = slot.get()
        return result


class DefaultOptions(OptionsBase):
    @override
    def initialize(self) -> None:
        # Logging
        self.add_enum("logging.levels.default", "verbosity", "v", f"Default verbosity. {LEVEL_HELP}", LoggingLevel.choices(), "info")
        self.add_enum("logging.levels.tty", "console-verbosity", "cv", f"Console verbosity. {LEVEL_HELP}", LoggingLevel.choices(), "notset")
        self.add_enum("logging.levels.file", "logfile-verbosity", "lv", f"Logfile verbosity. {LEVEL_HELP}", LoggingLevel.choices(), "off")
        self.add("logging.rich", "rich", "r", bool, "Use rich for console output", default=True)
        self.add("logging.dir", "log-dir", "ld", pathlib.Path, "Log file directory", default=pathlib.Path.cwd())
