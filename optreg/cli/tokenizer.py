# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Split an argument vector into flag/value pairs and positional arguments.

Every flag takes exactly one value, the token that follows it, even when that token starts with a dash.

>>> stream = tokenize(["-v", "debug", "input.txt", "--mode", "ser"])
>>> [(token.flag, token.value) for token in stream.flags]
[('-v', 'debug'), ('--mode', 'ser')]
>>> stream.positionals
['input.txt']
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from ..registry.errors import MissingValueError


END_OF_OPTIONS = "--"
DEFAULT_HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True, slots=True)
class FlagToken:
    flag: str
    name: str
    long: bool
    value: str


@dataclass(slots=True)
class TokenStream:
    flags: list[FlagToken] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)
    help_requested: bool = False


def is_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def tokenize(argv: Iterable[str], *, help_flags: Collection[str] = DEFAULT_HELP_FLAGS) -> TokenStream:
    stream = TokenStream()
    tokens = iter(argv)

    for token in tokens:
        if token == END_OF_OPTIONS:
            stream.positionals.extend(tokens)
            break

        if token in help_flags:
            stream.help_requested = True
            continue

        if not is_flag(token):
            stream.positionals.append(token)
            continue

        long = token.startswith("--")
        value = next(tokens, None)
        if value is None:
            raise MissingValueError(token)

        stream.flags.append(FlagToken(flag=token, name=token[2:] if long else token[1:], long=long, value=value))

    return stream
