# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Command-line front end: tokenizes argv and applies each flag to an :class:`OptionRegistry`."""

import enum
import sys

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NoReturn

from rich.console import Console

from ..registry import OptionError, OptionInfo, OptionRegistry, Slot
from ..registry.registry import UNSET
from ..util.helpers import script_info
from ..util.mixins import LoggableMixin
from . import help as help_
from .tokenizer import tokenize


@dataclass(slots=True)
class ParsedCommandLine:
    positionals: list[str] = field(default_factory=list)
    applied: list[str] = field(default_factory=list)
    help_requested: bool = False


class CommandLine(LoggableMixin):
    def __init__(self, prog: str | None = None, description: str = "", registry: OptionRegistry | None = None) -> None:
        super().__init__()
        self.prog = prog if prog is not None else script_info.get_exe_name()
        self.description = description
        self.registry = registry if registry is not None else OptionRegistry()
        self.registry.log_parent = self
        self.positionals: list[help_.Positional] = []

    # MARK: Declaration
    def add_option[T](self, destination: Slot[T], name: str, short_name: str = "", description: str = "", default: Any = UNSET) -> OptionInfo:
        return self.registry.add_option(destination, name, short_name, description, default)

    def add_enum_option[T](
        self,
        destination: Slot[T],
        name: str,
        short_name: str,
        description: str,
        choices: Iterable[tuple[str, T]] | Mapping[str, T] | type[enum.Enum],
        default: str,
    ) -> OptionInfo:
        return self.registry.add_enum_option(destination, name, short_name, description, choices, default)

    def add_positional(self, name: str, description: str = "") -> None:
        self.positionals.append((name, description))

    @property
    def help_flags(self) -> tuple[str, ...]:
        """Help flags not shadowed by a registered option."""
        flags = []
        if self.registry.find_short("h") is None and "h" not in self.registry:
            flags.append("-h")
        if "help" not in self.registry:
            flags.append("--help")
        return tuple(flags)

    # MARK: Parsing
    def parse(self, argv: Sequence[str] | None = None) -> ParsedCommandLine:
        """Apply ``argv`` (defaults to ``sys.argv[1:]``) to the registered options.

        Flags are applied in order, so a repeated option keeps its last value.

        Raises:
            UnknownOptionError: A flag names no registered option.
            MissingValueError: The last flag has no value.
            OptionParseError: An enum option received an ambiguous or unknown value.

        """
        if argv is None:
            argv = sys.argv[1:]

        stream = tokenize(argv, help_flags=self.help_flags)

        parsed = ParsedCommandLine(positionals=stream.positionals, help_requested=stream.help_requested)
        for token in stream.flags:
            info = self.registry.resolve(token.name, short=not token.long)
            self.registry.apply_or_raise(info.name, token.value)
            parsed.applied.append(info.name)

        self.log.debug("Parsed %d option(s) and %d positional(s)", len(parsed.applied), len(parsed.positionals))
        return parsed

    def parse_or_exit(self, argv: Sequence[str] | None = None, console: Console | None = None) -> ParsedCommandLine:
        try:
            parsed = self.parse(argv)
        except OptionError as err:
            self.exit_with_error(str(err), console)

        if parsed.help_requested:
            self.print_help(console)
            raise SystemExit(0)

        return parsed

    def exit_with_error(self, message: str, console: Console | None = None) -> NoReturn:
        """Report a usage error, print the usage line to stderr and exit with status 2."""
        self.log.error("%s", message)
        (console or Console(stderr=True)).print(self.format_usage(), markup=False, highlight=False)
        raise SystemExit(2)

    # MARK: Help
    def format_usage(self) -> str:
        return help_.format_usage(self.prog, self.registry, self.positionals)

    def format_help(self, **kwargs: Any) -> str:
        return help_.format_help(self.prog, self.description, self.registry, self.positionals, **kwargs)

    def print_help(self, console: Console | None = None) -> None:
        help_.print_help(self.prog, self.description, self.registry, self.positionals, console=console)
