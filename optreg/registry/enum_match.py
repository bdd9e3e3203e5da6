# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Prefix matching of a raw token against an ordered table of enum labels.

>>> TABLE = (("serial", 1), ("parallel", 2))
>>> match_enum_prefix("ser", TABLE)
EnumMatch(value=1, label='serial')
>>> match_enum_prefix("x", TABLE)
NoMatch(token='x', choices=('serial', 'parallel'))

An exact match is not preferred over a longer label sharing the same prefix:

>>> match_enum_prefix("run", (("run", 1), ("running", 2)))
Ambiguous(token='run', candidates=('run', 'running'))
"""

import enum

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .outcome import Ambiguous, NoMatch


type EnumTable[T] = tuple[tuple[str, T], ...]


@dataclass(frozen=True, slots=True)
class EnumMatch[T]:
    value: T
    label: str


def match_enum_prefix[T](token: str, table: Sequence[tuple[str, T]]) -> EnumMatch[T] | Ambiguous | NoMatch:
    found: EnumMatch[T] | None = None

    for label, value in table:
        if not label.startswith(token):
            continue
        if found is not None:
            # Second hit; any further candidates cannot make this unambiguous
            return Ambiguous(token, (found.label, label))
        found = EnumMatch(value, label)

    if found is None:
        return NoMatch(token, tuple(label for label, _ in table))
    return found


def enum_label(member: enum.Enum) -> str:
    if isinstance(member, enum.StrEnum):
        return member.value
    return member.name


def build_enum_table(choices: Iterable[tuple[str, Any]] | Mapping[str, Any] | type[enum.Enum]) -> EnumTable[Any]:
    """Copy ``choices`` into an immutable, ordered ``(label, value)`` table.

    Accepts a sequence of pairs, a mapping of label to value, or an :class:`enum.Enum` subclass. Enum members are
    labelled by their value for :class:`enum.StrEnum`, and by their name otherwise.
    """
    if isinstance(choices, type) and issubclass(choices, enum.Enum):
        return tuple((enum_label(member), member) for member in choices)

    if isinstance(choices, Mapping):
        pairs = choices.items()
    else:
        pairs = choices

    table = []
    for pair in pairs:
        label, value = pair
        if not isinstance(label, str):
            msg = f"Enum labels must be strings, got {type(label).__name__}"
            raise TypeError(msg)
        table.append((label, value))
    return tuple(table)
