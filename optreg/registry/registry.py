# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Registry of named command-line options bound to caller-owned destinations.

Registration stores one :class:`OptionInfo` per long name. Applying a token looks the entry up and lets its binding
parse the token and write the destination. No parsing happens at registration time.
"""

import enum

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final

from ..util.mixins import LoggableMixin
from .binding import EnumBinding, Slot, ValueBinding
from .enum_match import build_enum_table
from .errors import OptionParseError, UnknownOptionError
from .option_info import OptionInfo
from .outcome import ParseResult, ParseSuccess
from .values import format_value


class _Unset:
    pass


UNSET: Final = _Unset()


class OptionRegistry(LoggableMixin):
    def __init__(self) -> None:
        super().__init__()
        self._options: dict[str, OptionInfo] = {}

    # MARK: Registration
    def _insert(self, info: OptionInfo) -> OptionInfo:
        if info.name in self._options:
            # Last registration wins
            self.log.debug("Option '%s' registered again, replacing previous entry", info.name)

        if info.short_name and (other := self.find_short(info.short_name)) is not None and other.name != info.name:
            self.log.warning("Short name '-%s' of option '%s' is already used by option '%s'", info.short_name, info.name, other.name)

        self._options[info.name] = info
        return info

    def add_option[T](self, destination: Slot[T], name: str, short_name: str = "", description: str = "", default: Any = UNSET) -> OptionInfo:
        """Register an option that parses tokens into ``destination``'s type.

        Args:
            destination: Slot the parsed value is written to.
            name: Long name, unique within the registry.
            short_name: Optional single-dash alias.
            description: Help text.
            default: Value whose string form is shown as the default. Defaults to the slot's current value.

        Returns:
            OptionInfo: The registered entry.

        """
        binding = ValueBinding(destination)

        if default is UNSET:
            default = destination.get()
        default_string = "" if default is None else format_value(default)

        return self._insert(
            OptionInfo(
                name=name,
                short_name=short_name,
                description=description,
                default_value_string=default_string,
                current_value_string=default_string,
                binding=binding,
            )
        )

    def add_enum_option[T](
        self,
        destination: Slot[T],
        name: str,
        short_name: str,
        description: str,
        choices: Iterable[tuple[str, T]] | Mapping[str, T] | type[enum.Enum],
        default: str,
    ) -> OptionInfo:
        """Register an option restricted to a set of labelled values.

        Tokens are matched as prefixes of the labels, so any unambiguous abbreviation selects a value. ``default`` is
        the default label, stored as given.
        """
        binding = EnumBinding(destination, build_enum_table(choices))

        return self._insert(
            OptionInfo(
                name=name,
                short_name=short_name,
                description=description,
                default_value_string=default,
                current_value_string=default,
                binding=binding,
                enum_values=binding.labels,
            )
        )

    # MARK: Lookup
    def get(self, name: str) -> OptionInfo | None:
        return self._options.get(name)

    def find_short(self, short_name: str) -> OptionInfo | None:
        found = None
        for info in self._options.values():
            if info.short_name == short_name:
                found = info
        return found

    def resolve(self, flag_name: str, *, short: bool) -> OptionInfo:
        """Resolve a flag name as typed on the command line.

        Single-dash names try the short aliases first and fall back to long names. Double-dash names only match long
        names.
        """
        info = None
        if short:
            info = self.find_short(flag_name)
        if info is None:
            info = self._options.get(flag_name)
        if info is None:
            raise UnknownOptionError(f"{'-' if short else '--'}{flag_name}")
        return info

    def __getitem__(self, name: str) -> OptionInfo:
        try:
            return self._options[name]
        except KeyError as err:
            raise UnknownOptionError(name) from err

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[OptionInfo]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    # MARK: Parsing
    def apply(self, name: str, raw: str) -> ParseResult:
        info = self[name]
        result = info.apply(raw)
        if isinstance(result, ParseSuccess):
            self.log.debug("Option '%s' set to '%s'", name, result.display)
        return result

    def apply_or_raise(self, name: str, raw: str) -> OptionInfo:
        result = self.apply(name, raw)
        if not isinstance(result, ParseSuccess):
            raise OptionParseError(name, result)
        return self._options[name]
