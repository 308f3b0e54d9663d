from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, NamedTuple

from constants import SETTING_ROWS, SETTING_COLUMNS, VALUE_COLUMN
from gridProvider import Region, WidgetKind
from validators import validate_setting_name, validate_possible_values, InvalidConfiguration


class SettingType(Enum):
    TEXT = 1
    CHECKBOX = 2
    DROPDOWN = 3


class SettingSize(NamedTuple):
    rows: int
    columns: int


@dataclass(frozen=True)
class Setting:
    """One row of the settings sheet: name, value and description."""

    name: str
    default_value: object
    description: str = ""

    setting_type: ClassVar[SettingType] = SettingType.TEXT

    def __post_init__(self):
        validate_setting_name(self.name)
        if self.description is None:
            object.__setattr__(self, "description", "")

    def get_default(self):
        return self.default_value

    def get_size(self):
        return SettingSize(SETTING_ROWS, SETTING_COLUMNS)

    def get_default_values(self):
        return [self.name, self.get_default(), self.description]

    def value_cell(self, region):
        return region.cell(1, VALUE_COLUMN)

    def render(self, grid, sheet, region: Region):
        values = self.get_default_values()
        grid.write_region(sheet, region.row, region.column, 1, len(values), [values])


@dataclass(frozen=True)
class TextSetting(Setting):
    default_value: object = ""

    setting_type: ClassVar[SettingType] = SettingType.TEXT


@dataclass(frozen=True)
class CheckboxSetting(Setting):
    default_value: bool = False

    setting_type: ClassVar[SettingType] = SettingType.CHECKBOX

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.default_value, bool):
            raise InvalidConfiguration(f"Checkbox {self.name!r}: default must be True or False, got {self.default_value!r}")

    def render(self, grid, sheet, region: Region):
        super().render(grid, sheet, region)
        row, col = self.value_cell(region)
        grid.set_cell_widget(sheet, row, col, WidgetKind.TOGGLE)


@dataclass(frozen=True, init=False)
class DropdownSetting(Setting):
    possible_values: tuple = field(default=())

    setting_type: ClassVar[SettingType] = SettingType.DROPDOWN

    def __init__(self, name, possible_values, description=""):
        validate_setting_name(name)
        validate_possible_values(name, possible_values)
        values = tuple(str(value) for value in possible_values)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "possible_values", values)
        object.__setattr__(self, "default_value", values[0])
        object.__setattr__(self, "description", description or "")

    def render(self, grid, sheet, region: Region):
        super().render(grid, sheet, region)
        row, col = self.value_cell(region)
        grid.set_cell_widget(sheet, row, col, WidgetKind.CHOICE, list(self.possible_values))
