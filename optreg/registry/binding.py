# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Destination handles and the bindings that write parsed tokens into them.

A slot holds a strong reference to its storage, so a registered option can never outlive the variable it writes to.
"""

from typing import Any, Protocol, override, runtime_checkable

from .enum_match import EnumMatch, EnumTable, match_enum_prefix
from .outcome import ParseResult, ParseSuccess
from .values import get_value_type


# MARK: Slots
@runtime_checkable
class Slot[T](Protocol):
    @property
    def value_type(self) -> type[T]: ...

    def get(self) -> T: ...

    def set(self, value: T) -> None: ...


class ValueSlot[T]:
    """Self-contained storage for a single option value.

    >>> port = ValueSlot(int, 8080)
    >>> port.set(9090)
    >>> port.value
    9090
    """

    def __init__(self, value_type: type[T], value: T | None = None) -> None:
        self._value_type = value_type
        self.value = value

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    def get(self) -> T:
        return self.value  # pyright: ignore[reportReturnType]

    def set(self, value: T) -> None:
        self.value = value

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value_type.__name__}, {self.value!r})"


class AttributeSlot:
    """Writes into ``target.attribute``, e.g. a field of a settings object."""

    def __init__(self, target: object, attribute: str, value_type: type | None = None) -> None:
        if value_type is None:
            current = getattr(target, attribute)
            if current is None:
                msg = f"Cannot infer the type of '{attribute}' from a None value, pass value_type explicitly"
                raise TypeError(msg)
            value_type = type(current)

        self.target = target
        self.attribute = attribute
        self._value_type = value_type

    @property
    def value_type(self) -> type:
        return self._value_type

    def get(self) -> Any:
        return getattr(self.target, self.attribute)

    def set(self, value: Any) -> None:
        setattr(self.target, self.attribute, value)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.target).__name__}.{self.attribute})"


# MARK: Bindings
@runtime_checkable
class OptionBinding(Protocol):
    def apply_token(self, raw: str) -> ParseResult: ...


class ValueBinding[T]:
    def __init__(self, slot: Slot[T]) -> None:
        self.slot = slot
        # Fails early for types without a parser
        self.strategy = get_value_type(slot.value_type)

    def apply_token(self, raw: str) -> ParseResult:
        value = self.strategy.parse(raw)
        self.slot.set(value)
        return ParseSuccess(self.strategy.format(value))


class EnumBinding[T]:
    def __init__(self, slot: Slot[T], table: EnumTable[T]) -> None:
        self.slot = slot
        self.table = table

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.table)

    def apply_token(self, raw: str) -> ParseResult:
        match = match_enum_prefix(raw, self.table)
        if not isinstance(match, EnumMatch):
            return match

        self.slot.set(match.value)
        return ParseSuccess(match.label)
