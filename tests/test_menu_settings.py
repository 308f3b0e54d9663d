from __future__ import annotations

import dataclasses

import pytest

from gridProvider import Region, WidgetKind
from menuSettings import (
    CheckboxSetting,
    DropdownSetting,
    SettingSize,
    SettingType,
    TextSetting,
)
from validators import InvalidConfiguration


class RecordingGrid:
    def __init__(self) -> None:
        self.calls = []

    def write_region(self, handle, row, col, rows, cols, values):
        self.calls.append(("write_region", handle, row, col, rows, cols, values))

    def set_cell_widget(self, handle, row, col, kind, options=None):
        self.calls.append(("set_cell_widget", handle, row, col, kind, options))


def test_default_values_are_name_default_description() -> None:
    assert TextSetting("A", "1", "d1").get_default_values() == ["A", "1", "d1"]
    assert CheckboxSetting("B", False, "d2").get_default_values() == ["B", False, "d2"]
    assert DropdownSetting("C", ["x", "y"], "d3").get_default_values() == ["C", "x", "d3"]


def test_dropdown_default_is_first_possible_value() -> None:
    setting = DropdownSetting("Mode", ["fast", "safe"])
    assert setting.get_default() == "fast"
    assert setting.possible_values == ("fast", "safe")
    assert setting.description == ""


def test_dropdown_values_are_stored_as_text() -> None:
    setting = DropdownSetting("Level", [1, 2, 3, 4, 5], "Example 4")
    assert setting.possible_values == ("1", "2", "3", "4", "5")
    assert setting.get_default() == "1"


@pytest.mark.parametrize("values", [[], (), None, "abc"])
def test_dropdown_without_values_is_rejected(values) -> None:
    with pytest.raises(InvalidConfiguration):
        DropdownSetting("Mode", values)


def test_dropdown_rejects_duplicate_and_blank_values() -> None:
    with pytest.raises(InvalidConfiguration):
        DropdownSetting("Mode", ["a", "a"])
    with pytest.raises(InvalidConfiguration):
        DropdownSetting("Mode", ["a", ""])


def test_every_variant_is_one_row_three_columns() -> None:
    for setting in (TextSetting("A", "x"), CheckboxSetting("B"), DropdownSetting("C", ["x"])):
        assert setting.get_size() == SettingSize(1, 3)
        assert setting.get_size().rows == 1
        assert setting.get_size().columns == 3


def test_setting_types_are_distinct() -> None:
    assert TextSetting.setting_type is SettingType.TEXT
    assert CheckboxSetting.setting_type is SettingType.CHECKBOX
    assert DropdownSetting.setting_type is SettingType.DROPDOWN
    assert len(set(SettingType)) == 3


def test_checkbox_defaults_to_false_and_requires_bool() -> None:
    assert CheckboxSetting("B").get_default() is False
    with pytest.raises(InvalidConfiguration):
        CheckboxSetting("B", "yes")


@pytest.mark.parametrize("name", ["", "   ", None, 3])
def test_setting_name_must_be_text(name) -> None:
    with pytest.raises(InvalidConfiguration):
        TextSetting(name, "x")


def test_settings_are_immutable() -> None:
    setting = TextSetting("A", "1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        setting.name = "B"

    dropdown = DropdownSetting("C", ["x"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        dropdown.possible_values = ("y",)


def test_text_render_only_writes_the_row() -> None:
    grid = RecordingGrid()
    TextSetting("A", "1", "d1").render(grid, "sheet", Region(5, 1, 1, 3))

    assert grid.calls == [("write_region", "sheet", 5, 1, 1, 3, [["A", "1", "d1"]])]


def test_checkbox_render_adds_toggle_on_value_cell() -> None:
    grid = RecordingGrid()
    CheckboxSetting("B", True, "d2").render(grid, "sheet", Region(4, 1, 1, 3))

    assert grid.calls == [
        ("write_region", "sheet", 4, 1, 1, 3, [["B", True, "d2"]]),
        ("set_cell_widget", "sheet", 4, 2, WidgetKind.TOGGLE, None),
    ]


def test_dropdown_render_adds_choice_list_on_value_cell() -> None:
    grid = RecordingGrid()
    DropdownSetting("C", ["x", "y"], "d3").render(grid, "sheet", Region(6, 1, 1, 3))

    assert grid.calls[0] == ("write_region", "sheet", 6, 1, 1, 3, [["C", "x", "d3"]])
    assert grid.calls[1] == ("set_cell_widget", "sheet", 6, 2, WidgetKind.CHOICE, ["x", "y"])
