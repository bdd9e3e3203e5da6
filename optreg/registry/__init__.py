# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .binding import AttributeSlot, EnumBinding, OptionBinding, Slot, ValueBinding, ValueSlot
from .enum_match import EnumMatch, build_enum_table, match_enum_prefix
from .errors import MissingValueError, OptionError, OptionParseError, UnknownOptionError, UnsupportedValueTypeError
from .option_info import OptionInfo
from .outcome import Ambiguous, NoMatch, ParseFailure, ParseResult, ParseSuccess
from .registry import OptionRegistry
from .values import ValueType, format_value, parse_value, register_value_type


__all__ = [
    "Ambiguous",
    "AttributeSlot",
    "EnumBinding",
    "EnumMatch",
    "MissingValueError",
    "NoMatch",
    "OptionBinding",
    "OptionError",
    "OptionInfo",
    "OptionParseError",
    "OptionRegistry",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "Slot",
    "UnknownOptionError",
    "UnsupportedValueTypeError",
    "ValueBinding",
    "ValueSlot",
    "ValueType",
    "build_enum_table",
    "format_value",
    "match_enum_prefix",
    "parse_value",
    "register_value_type",
]
