# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Explicit results of applying a raw token to an option.

A binding never raises for a bad token. It returns one of the result types below, and the caller decides whether a
failure is fatal.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    display: str

    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Ambiguous:
    token: str
    candidates: tuple[str, ...]

    ok: ClassVar[bool] = False

    def describe(self, option_name: str) -> str:
        candidates = ", ".join(f"'{c}'" for c in self.candidates)
        return f"Ambiguous value '{self.token}' for option '{option_name}': matches {candidates}"


@dataclass(frozen=True, slots=True)
class NoMatch:
    token: str
    choices: tuple[str, ...]

    ok: ClassVar[bool] = False

    def describe(self, option_name: str) -> str:
        choices = ", ".join(f"'{c}'" for c in self.choices)
        return f"Invalid value '{self.token}' for option '{option_name}': expected one of {choices or '(none)'}"


type ParseFailure = Ambiguous | NoMatch
type ParseResult = ParseSuccess | ParseFailure
