# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from dataclasses import dataclass, field

from .binding import OptionBinding
from .outcome import ParseResult, ParseSuccess


@dataclass(slots=True)
class OptionInfo:
    name: str
    short_name: str
    description: str
    default_value_string: str
    current_value_string: str
    binding: OptionBinding = field(repr=False)
    enum_values: tuple[str, ...] = ()

    @property
    def is_enum(self) -> bool:
        return bool(self.enum_values)

    @property
    def flags(self) -> tuple[str, ...]:
        if self.short_name:
            return (f"-{self.short_name}", f"--{self.name}")
        return (f"--{self.name}",)

    def apply(self, raw: str) -> ParseResult:
        """Apply a raw command-line token to this option.

        On success the bound destination is updated and ``current_value_string`` records the canonical rendering of the
        new value (the full label for enum options). On failure nothing changes.
        """
        result = self.binding.apply_token(raw)
        if isinstance(result, ParseSuccess):
            self.current_value_string = result.display
        return result
