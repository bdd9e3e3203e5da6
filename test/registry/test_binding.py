# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import pathlib

from dataclasses import dataclass

import pytest

from optreg.registry import Ambiguous, AttributeSlot, EnumBinding, OptionBinding, ParseSuccess, Slot, ValueBinding, ValueSlot


@dataclass
class Settings:
    jobs: int = 1
    output: pathlib.Path | None = None


@pytest.mark.registry
@pytest.mark.binding
class TestSlots:
    def test_value_slot_owns_value(self):
        slot = ValueSlot(int, 3)
        assert slot.get() == 3
        slot.set(4)
        assert slot.value == 4
        assert slot.value_type is int
        assert isinstance(slot, Slot)

    def test_attribute_slot_infers_type(self):
        settings = Settings()
        slot = AttributeSlot(settings, "jobs")
        assert slot.value_type is int
        slot.set(8)
        assert settings.jobs == 8
        assert isinstance(slot, Slot)

    def test_attribute_slot_needs_type_for_none(self):
        with pytest.raises(TypeError, match="value_type"):
            AttributeSlot(Settings(), "output")

        slot = AttributeSlot(Settings(), "output", pathlib.Path)
        assert slot.value_type is pathlib.Path


@pytest.mark.registry
@pytest.mark.binding
class TestBindings:
    def test_value_binding_writes_destination(self):
        settings = Settings()
        binding = ValueBinding(AttributeSlot(settings, "jobs"))
        assert isinstance(binding, OptionBinding)

        result = binding.apply_token("16")
        assert result == ParseSuccess("16")
        assert settings.jobs == 16

    def test_value_binding_reports_canonical_display(self):
        slot = ValueSlot(bool, False)
        assert ValueBinding(slot).apply_token("trivial") == ParseSuccess("true")
        assert slot.value is True

    def test_enum_binding_assigns_on_unique_match(self):
        slot = ValueSlot(int, 0)
        binding = EnumBinding(slot, (("serial", 1), ("parallel", 2)))
        assert binding.labels == ("serial", "parallel")

        assert binding.apply_token("par") == ParseSuccess("parallel")
        assert slot.value == 2

    def test_enum_binding_leaves_destination_on_failure(self):
        slot = ValueSlot(int, 0)
        binding = EnumBinding(slot, (("alpha", 1), ("alphabet", 2)))

        result = binding.apply_token("alp")
        assert isinstance(result, Ambiguous)
        assert slot.value == 0
