# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Per-type parse and format strategies for option values.

Parsing mimics stream extraction: it reads the longest leading token it understands and never rejects input. A token
that does not parse at all yields the type's zero value.

>>> parse_value(int, "12abc")
12
>>> parse_value(int, "abc")
0
>>> parse_value(bool, "trivial")
True
>>> format_value(False)
'false'
"""

import pathlib
import re

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import UnsupportedValueTypeError


INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True, slots=True)
class ValueType[T]:
    python_type: type[T]
    parse: Callable[[str], T]
    format: Callable[[T], str] = str


# MARK: Built-in strategies
def parse_bool(token: str) -> bool:
    return token[:1] == "t"


def format_bool(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def parse_int(token: str) -> int:
    if (match := INT_PREFIX.match(token)) is None:
        return 0
    return int(match.group(1))


def parse_float(token: str) -> float:
    if (match := FLOAT_PREFIX.match(token)) is None:
        return 0.0
    return float(match.group(1))


def format_float(value: float) -> str:
    return f"{value:g}"


def parse_str(token: str) -> str:
    words = token.split(maxsplit=1)
    return words[0] if words else ""


def parse_path(token: str) -> pathlib.Path:
    return pathlib.Path(token)


def format_path(value: pathlib.PurePath) -> str:
    return value.as_posix()


VALUE_TYPES: dict[type, ValueType[Any]] = {}


def register_value_type[T](python_type: type[T], parse: Callable[[str], T], format: Callable[[T], str] = str) -> ValueType[T]:  # noqa: A002
    value_type = ValueType(python_type, parse, format)
    VALUE_TYPES[python_type] = value_type
    return value_type


# fmt: off
register_value_type(bool        , parse_bool , format_bool )
register_value_type(int         , parse_int                )
register_value_type(float       , parse_float, format_float)
register_value_type(str         , parse_str                )
register_value_type(pathlib.Path, parse_path , format_path )
# fmt: on


# MARK: Lookup
def get_value_type[T](python_type: type[T]) -> ValueType[T]:
    # Walk the MRO so subclasses of registered types (e.g. PosixPath) resolve to their base strategy
    for klass in python_type.__mro__:
        if (value_type := VALUE_TYPES.get(klass)) is not None:
            return value_type

    msg = f"No value parser registered for type {python_type.__name__}"
    raise UnsupportedValueTypeError(msg)


def parse_value[T](python_type: type[T], token: str) -> T:
    return get_value_type(python_type).parse(token)


def format_value(value: Any, python_type: type | None = None) -> str:
    if python_type is None:
        python_type = type(value)
    return get_value_type(python_type).format(value)
