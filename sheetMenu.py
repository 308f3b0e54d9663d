import logging
from dataclasses import dataclass, fields, replace

from constants import SHEET_NAME, SHEET_TITLE, SETTING_SPACING, HEADER_ROWS, SETTING_COLUMNS, VALUE_COLUMN, VALUE_COLUMN_PADDING
from excelLayoutState import LayoutState
from gridProvider import OpenpyxlGridProvider, Region
from validators import validate_options, validate_unique_names, InvalidConfiguration, UnknownSettingName


# camelCase spellings used by existing host scripts
OPTION_ALIASES = {
    "sheetName": "sheet_name",
    "sheetTitle": "title_text",
    "titleText": "title_text",
    "settingSpacing": "row_spacing",
    "rowSpacing": "row_spacing",
    "headerRows": "header_rows",
}


@dataclass(frozen=True)
class MenuOptions:
    sheet_name: str = SHEET_NAME
    title_text: str = SHEET_TITLE
    row_spacing: int = SETTING_SPACING
    header_rows: int = HEADER_ROWS

    def __post_init__(self):
        validate_options(self)

    @classmethod
    def from_mapping(cls, options):
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        known = {f.name for f in fields(cls)}
        merged = {}
        for key, value in options.items():
            key = OPTION_ALIASES.get(key, key)
            if key not in known:
                raise InvalidConfiguration(f"Unrecognised menu option: {key}")
            merged[key] = value

        return replace(cls(), **merged)


class SheetMenu:
    """Settings menu laid out as rows of a dedicated sheet.

    Each setting occupies one row: name, value, description. The value column
    is what users edit and what ``get`` reads back.

    Example::

        menu = SheetMenu({"title_text": "Menu", "row_spacing": 1},
                         TextSetting("Setting 1", "Value 1", "Example 1"),
                         CheckboxSetting("Setting 2", False, "Example 2"),
                         DropdownSetting("Setting 3", ["a", "b", "c"], "Example 3"))
        menu.draw()
        menu.get("Setting 2")  # False until someone ticks it
    """

    def __init__(self, options=None, *settings, grid=None):
        self.options = MenuOptions.from_mapping(options)

        validate_unique_names(settings)
        self.settings = tuple(settings)

        self.grid = grid if grid is not None else OpenpyxlGridProvider()

        self._structure = None
        self._sheet = None
        self._last_row = None
        self._columns = None

        logging.info(f"SheetMenu initialized for sheet {self.options.sheet_name} with {len(self.settings)} settings")

    def __len__(self):
        return len(self.settings)

    def __iter__(self):
        return iter(self.settings)

    def __contains__(self, name):
        return name in self.structure

    @property
    def structure(self):
        if self._structure is not None:
            return self._structure

        state = LayoutState(start_row=self.options.header_rows + 1, spacing=self.options.row_spacing)
        structure = {}
        for setting in self.settings:
            structure[setting.name] = state.place(setting.get_size())

        self._last_row = max(state.last_row, self.options.header_rows)
        self._columns = max(state.max_columns, SETTING_COLUMNS)
        self._structure = structure
        return self._structure

    def compute_structure(self):
        return self.structure

    @property
    def last_row(self):
        self.compute_structure()
        return self._last_row

    @property
    def columns(self):
        self.compute_structure()
        return self._columns

    @property
    def sheet(self):
        if self._sheet is not None:
            return self._sheet

        self._sheet = self.grid.get_or_create_surface(self.options.sheet_name)
        return self._sheet

    def get_setting(self, name):
        for setting in self.settings:
            if setting.name == name:
                return setting
        raise UnknownSettingName(f"No setting named {name!r}")

    def region_for(self, setting):
        size = setting.get_size()
        return Region(self.structure[setting.name], 1, size.rows, size.columns)

    def draw(self):
        """Write the menu with every setting at its default value.

        Safe to call again: it resets every value, which is how a host
        offers "reset settings".
        """
        sheet = self.sheet
        bounds = Region(1, 1, self.last_row, self.columns)

        logging.info(f"Drawing settings menu on sheet {self.options.sheet_name}")

        self.grid.clear_widgets(sheet, bounds)
        self.grid.write_title(sheet, Region(1, 1, self.options.header_rows, self.columns), self.options.title_text)
        self.grid.fill_surface(sheet, bounds)

        for setting in self.settings:
            region = self.region_for(setting)
            setting.render(self.grid, sheet, region)
            row, col = setting.value_cell(region)
            self.grid.highlight_cell(sheet, row, col)

        self.grid.trim_surface(sheet, self.last_row, self.columns)
        self.grid.protect(sheet, bounds, warn_only=True)
        self.grid.fit_columns(sheet, {VALUE_COLUMN: VALUE_COLUMN_PADDING})

    def _row_for(self, name):
        row = self.structure.get(name)
        if row is None:
            raise UnknownSettingName(f"No setting named {name!r}")
        return row

    def get(self, name):
        """Current value of setting ``name`` as stored in the sheet."""
        row = self._row_for(name)
        value = self.grid.read_cell(self.sheet, row, VALUE_COLUMN)
        logging.debug(f"Read setting {name}: {value!r}")
        return value

    def get_all(self):
        """List of (name, value) pairs in declared order."""
        return [(setting.name, self.get(setting.name)) for setting in self.settings]

    def set(self, name, value):
        row = self._row_for(name)
        self.grid.write_region(self.sheet, row, VALUE_COLUMN, 1, 1, [[value]])
        logging.debug(f"Set setting {name} to {value!r}")
