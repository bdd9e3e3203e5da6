# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from typing import override

from .outcome import ParseFailure


class OptionError(Exception):
    pass


class OptionParseError(OptionError, ValueError):
    def __init__(self, option_name: str, result: ParseFailure) -> None:
        self.option_name = option_name
        self.result = result
        super().__init__(result.describe(option_name))


class UnknownOptionError(OptionError, KeyError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(flag)

    @override
    def __str__(self) -> str:
        # KeyError would otherwise repr() the key
        return f"Unknown option '{self.flag}'"


class MissingValueError(OptionError, ValueError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Option '{flag}' requires a value")


class UnsupportedValueTypeError(OptionError, TypeError):
    pass
