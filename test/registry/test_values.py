# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import pathlib

import pytest

from optreg.registry import UnsupportedValueTypeError, format_value, parse_value, register_value_type
from optreg.registry.values import VALUE_TYPES, get_value_type


@pytest.mark.registry
@pytest.mark.values
class TestBoolValues:
    @pytest.mark.parametrize("token", ["true", "t", "trivial", "tRUE"])
    def test_tokens_starting_with_t_are_true(self, token):
        assert parse_value(bool, token) is True

    @pytest.mark.parametrize("token", ["false", "f", "x", "", "True", "yes", "1"])
    def test_everything_else_is_false(self, token):
        assert parse_value(bool, token) is False

    @pytest.mark.parametrize("value", [True, False])
    def test_round_trip(self, value):
        assert parse_value(bool, format_value(value)) is value

    def test_format_uses_words(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"


@pytest.mark.registry
@pytest.mark.values
class TestNumericValues:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            ("  15", 15),
            ("12abc", 12),
            ("3.9", 3),
            ("abc", 0),
            ("", 0),
        ],
    )
    def test_int_reads_leading_digits(self, token, expected):
        assert parse_value(int, token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("0.5", 0.5),
            ("-2", -2.0),
            (".25", 0.25),
            ("1e3", 1000.0),
            ("2.5kg", 2.5),
            ("nope", 0.0),
        ],
    )
    def test_float_reads_leading_number(self, token, expected):
        assert parse_value(float, token) == expected

    def test_float_format_drops_trailing_zeroes(self):
        assert format_value(2.0) == "2"
        assert format_value(0.5) == "0.5"

    def test_int_format(self):
        assert format_value(-12) == "-12"


@pytest.mark.registry
@pytest.mark.values
class TestOtherValues:
    def test_str_takes_first_word(self):
        assert parse_value(str, "hello world") == "hello"
        assert parse_value(str, "  padded") == "padded"
        assert parse_value(str, "   ") == ""

    def test_path(self):
        assert parse_value(pathlib.Path, "a/b.txt") == pathlib.Path("a/b.txt")
        assert format_value(pathlib.Path("a/b.txt")) == "a/b.txt"

    def test_subclass_resolves_to_base_strategy(self):
        assert get_value_type(type(pathlib.Path("x"))).python_type is pathlib.Path

    def test_unsupported_type_is_rejected(self):
        class Opaque:
            pass

        with pytest.raises(UnsupportedValueTypeError, match="Opaque"):
            parse_value(Opaque, "x")

        # Also a TypeError for callers that do not know the hierarchy
        with pytest.raises(TypeError):
            format_value(Opaque())

    def test_register_custom_type(self):
        class Celsius(float):
            pass

        try:
            register_value_type(Celsius, lambda token: Celsius(token.rstrip("C")), lambda value: f"{float(value):g}C")
            assert parse_value(Celsius, "21.5C") == 21.5
            assert format_value(Celsius(21.5)) == "21.5C"
        finally:
            VALUE_TYPES.pop(Celsius, None)
