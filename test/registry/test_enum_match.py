# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import enum

import pytest

from optreg.registry import Ambiguous, EnumMatch, NoMatch, build_enum_table, match_enum_prefix


MODES = (("serial", 1), ("parallel", 2))


@pytest.mark.registry
@pytest.mark.enum_match
class TestMatchEnumPrefix:
    def test_unambiguous_prefix_selects_label(self):
        assert match_enum_prefix("ser", MODES) == EnumMatch(1, "serial")
        assert match_enum_prefix("p", MODES) == EnumMatch(2, "parallel")

    def test_full_label_matches(self):
        assert match_enum_prefix("parallel", MODES) == EnumMatch(2, "parallel")

    def test_shared_prefix_is_ambiguous(self):
        result = match_enum_prefix("a", (("alpha", 1), ("alphabet", 2)))
        assert isinstance(result, Ambiguous)
        assert result.candidates == ("alpha", "alphabet")
        assert not result.ok

    def test_exact_match_is_not_preferred(self):
        # "run" is a prefix of both labels, so it is ambiguous even though it equals one of them
        result = match_enum_prefix("run", (("run", 1), ("running", 2)))
        assert result == Ambiguous("run", ("run", "running"))

    def test_only_first_two_matches_are_reported(self):
        result = match_enum_prefix("x", (("xa", 1), ("b", 2), ("xb", 3), ("xc", 4)))
        assert result == Ambiguous("x", ("xa", "xb"))

    def test_no_match(self):
        result = match_enum_prefix("q", MODES)
        assert result == NoMatch("q", ("serial", "parallel"))
        assert not result.ok

    def test_match_is_case_sensitive(self):
        assert isinstance(match_enum_prefix("SER", MODES), NoMatch)

    def test_longer_token_than_label_does_not_match(self):
        assert isinstance(match_enum_prefix("serials", MODES), NoMatch)

    def test_empty_token(self):
        assert isinstance(match_enum_prefix("", MODES), Ambiguous)
        assert match_enum_prefix("", (("only", 7),)) == EnumMatch(7, "only")
        assert isinstance(match_enum_prefix("", ()), NoMatch)

    def test_failure_messages_name_the_option(self):
        assert "'mode'" in Ambiguous("a", ("ab", "ac")).describe("mode")
        assert "'serial', 'parallel'" in NoMatch("q", ("serial", "parallel")).describe("mode")


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Shape(enum.StrEnum):
    CIRCLE = "circle"
    SQUARE = "square"


@pytest.mark.registry
@pytest.mark.enum_match
class TestBuildEnumTable:
    def test_pairs_keep_order(self):
        assert build_enum_table([("b", 2), ("a", 1)]) == (("b", 2), ("a", 1))

    def test_mapping(self):
        assert build_enum_table({"x": 1, "y": 2}) == (("x", 1), ("y", 2))

    def test_enum_uses_member_names(self):
        assert build_enum_table(Color) == (("RED", Color.RED), ("GREEN", Color.GREEN))

    def test_str_enum_uses_values(self):
        assert build_enum_table(Shape) == (("circle", Shape.CIRCLE), ("square", Shape.SQUARE))

    def test_table_is_a_copy(self):
        source = [("a", 1)]
        table = build_enum_table(source)
        source.append(("b", 2))
        assert table == (("a", 1),)

    def test_non_string_label_rejected(self):
        with pytest.raises(TypeError, match="labels must be strings"):
            build_enum_table([(1, "a")])
