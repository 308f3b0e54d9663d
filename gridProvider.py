import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Protection
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.cell_range import CellRange, MultiCellRange
from openpyxl.worksheet.datavalidation import DataValidation

from constants import MAX_LIST_FORMULA_LENGTH, MIN_COLUMN_WIDTH
from excelHelpers import (
    write_cell,
    merge_and_style,
    unmerge_overlapping,
    fill_range,
    cell_ref,
    display_width,
    TITLE_FONT,
    CENTER,
    BOX,
    BACKGROUND_FILL,
    VALUE_FILL
)
from validators import GridProviderError


class WidgetKind(Enum):
    TOGGLE = "toggle"
    CHOICE = "choice"


@dataclass(frozen=True)
class Region:
    row: int
    column: int
    rows: int = 1
    columns: int = 1

    @property
    def last_row(self):
        return self.row + self.rows - 1

    @property
    def last_column(self):
        return self.column + self.columns - 1

    def cell(self, row, col):
        """Absolute (row, column) of the 1-based cell (row, col) inside the region."""
        if not (1 <= row <= self.rows and 1 <= col <= self.columns):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.columns} region")
        return self.row + row - 1, self.column + col - 1


class GridProvider(ABC):
    """Everything the settings menu needs from a spreadsheet backend.

    Handles returned by ``get_or_create_surface`` are opaque to callers and
    only ever passed back into the same provider.
    """

    @abstractmethod
    def get_or_create_surface(self, name):
        ...

    @abstractmethod
    def write_region(self, handle, row, col, rows, cols, values):
        ...

    @abstractmethod
    def read_cell(self, handle, row, col):
        ...

    @abstractmethod
    def set_cell_widget(self, handle, row, col, kind, options=None):
        ...

    @abstractmethod
    def trim_surface(self, handle, keep_rows, keep_cols):
        ...

    @abstractmethod
    def protect(self, handle, region, warn_only=True):
        ...

    # Presentation hooks, no-ops unless a backend can style cells

    def clear_widgets(self, handle, region):
        pass

    def write_title(self, handle, region, text):
        self.write_region(handle, region.row, region.column, 1, 1, [[text]])

    def fill_surface(self, handle, region):
        pass

    def highlight_cell(self, handle, row, col):
        pass

    def fit_columns(self, handle, padding=None):
        pass


class OpenpyxlGridProvider(GridProvider):
    def __init__(self, workbook=None):
        if workbook is None:
            workbook = Workbook()
            self._placeholder = workbook.active
        else:
            self._placeholder = None

        self.workbook = workbook
        self.protected = {}

    @classmethod
    def load(cls, source):
        try:
            workbook = load_workbook(source)
        except (InvalidFileException, BadZipFile, FileNotFoundError, KeyError, OSError) as e:
            raise GridProviderError(f"Could not open workbook {source!r}: {e}") from e
        logging.info(f"Loaded workbook with sheets {workbook.sheetnames}")
        return cls(workbook)

    def save(self, target):
        self.workbook.save(target)

    def get_or_create_surface(self, name):
        if name in self.workbook.sheetnames:
            return self.workbook[name]

        try:
            if self._placeholder is not None and self._placeholder.title in self.workbook.sheetnames:
                ws = self._placeholder
                ws.title = name
            else:
                ws = self.workbook.create_sheet(name)
        except ValueError as e:
            raise GridProviderError(f"Could not create sheet {name!r}: {e}") from e
        finally:
            self._placeholder = None

        logging.info(f"Created sheet {name}")
        return ws

    def write_region(self, handle, row, col, rows, cols, values):
        self._check_bounds(row, col)
        if len(values) != rows or any(len(line) != cols for line in values):
            raise GridProviderError(f"Expected a {rows}x{cols} block of values at {cell_ref(row, col)}")

        # merged cells other than the top-left one are read-only
        unmerge_overlapping(handle, row, col, row + rows - 1, col + cols - 1)

        for r, line in enumerate(values):
            for c, value in enumerate(line):
                handle.cell(row=row + r, column=col + c).value = value

        logging.debug(f"Wrote {rows}x{cols} block at {handle.title}!{cell_ref(row, col)}")

    def read_cell(self, handle, row, col):
        self._check_bounds(row, col)
        return handle.cell(row=row, column=col).value

    def set_cell_widget(self, handle, row, col, kind, options=None):
        self._check_bounds(row, col)
        ref = cell_ref(row, col)

        if kind is WidgetKind.TOGGLE:
            choices = ["TRUE", "FALSE"]
        elif kind is WidgetKind.CHOICE:
            choices = [str(option) for option in options or []]
            if not choices:
                raise GridProviderError(f"A choice list for {ref} needs at least one option")
        else:
            raise GridProviderError(f"Unsupported widget kind {kind!r}")

        for choice in choices:
            if "," in choice or '"' in choice:
                raise GridProviderError(f"Choice {choice!r} for {ref} cannot contain commas or quotes")

        formula = '"' + ",".join(choices) + '"'
        if len(formula) > MAX_LIST_FORMULA_LENGTH:
            raise GridProviderError(f"Choice list for {ref} is longer than {MAX_LIST_FORMULA_LENGTH} characters")

        target = CellRange(ref)
        self._prune_validations(handle, lambda r: target.issuperset(r))

        dv = DataValidation(
            type="list",
            formula1=formula,
            allow_blank=False,
            showErrorMessage=True
        )
        dv.errorTitle = "Invalid value"
        dv.error = "Pick one of: " + ", ".join(choices)
        handle.add_data_validation(dv)
        dv.add(ref)

        logging.debug(f"Applied {kind.value} widget to {handle.title}!{ref}")

    def trim_surface(self, handle, keep_rows, keep_cols):
        max_row = handle.max_row
        max_col = handle.max_column

        if max_row > keep_rows:
            unmerge_overlapping(handle, keep_rows + 1, 1, max_row, max_col)
        if max_col > keep_cols:
            unmerge_overlapping(handle, 1, keep_cols + 1, max_row, max_col)

        bounds = CellRange(min_col=1, min_row=1, max_col=max(keep_cols, 1), max_row=max(keep_rows, 1))
        self._prune_validations(handle, lambda r: not bounds.issuperset(r))

        if max_row > keep_rows:
            handle.delete_rows(keep_rows + 1, max_row - keep_rows)
        if max_col > keep_cols:
            handle.delete_cols(keep_cols + 1, max_col - keep_cols)

        logging.info(f"Trimmed sheet {handle.title} to {keep_rows} rows and {keep_cols} columns")

    def protect(self, handle, region, warn_only=True):
        """Lock the cells of ``region``.

        xlsx has no warning-only protection: locked cells only take effect
        once sheet protection is on. With ``warn_only`` the sheet's existing
        protection is left as it is, so the lock is recorded in
        ``self.protected`` but not enforced by a spreadsheet application.
        """
        for line in handle.iter_rows(min_row=region.row, max_row=region.last_row, min_col=region.column, max_col=region.last_column):
            for cell in line:
                cell.protection = Protection(locked=True)

        if not warn_only:
            handle.protection.enable()

        self.protected[handle.title] = (region, warn_only)
        logging.info(f"Protected {handle.title}!{cell_ref(region.row, region.column)}:{cell_ref(region.last_row, region.last_column)} (warn only: {warn_only})")

    def clear_widgets(self, handle, region):
        block = CellRange(min_col=region.column, min_row=region.row, max_col=region.last_column, max_row=region.last_row)
        self._prune_validations(handle, lambda r: not block.isdisjoint(r))

    def write_title(self, handle, region, text):
        merge_and_style(
            handle,
            region.row,
            region.column,
            region.last_row,
            region.last_column,
            text,
            font=TITLE_FONT,
            align=CENTER
        )

    def fill_surface(self, handle, region):
        fill_range(handle, region.row, region.column, region.last_row, region.last_column, BACKGROUND_FILL)

    def highlight_cell(self, handle, row, col):
        write_cell(handle, row, col, fill=VALUE_FILL, border=BOX)

    def fit_columns(self, handle, padding=None):
        padding = padding or {}
        spanned = set()
        for merged in handle.merged_cells.ranges:
            if merged.max_col > merged.min_col:
                spanned.update(merged.cells)

        widths = {}
        for line in handle.iter_rows():
            for cell in line:
                if (cell.row, cell.column) in spanned:
                    continue
                widths[cell.column] = max(widths.get(cell.column, 0), display_width(cell.value))

        for col, width in widths.items():
            handle.column_dimensions[get_column_letter(col)].width = max(width + 2, MIN_COLUMN_WIDTH) + padding.get(col, 0)

    def _prune_validations(self, handle, should_drop):
        validations = handle.data_validations.dataValidation
        for dv in list(validations):
            kept = [r for r in dv.sqref.ranges if not should_drop(r)]
            if not kept:
                validations.remove(dv)
            elif len(kept) != len(dv.sqref.ranges):
                dv.sqref = MultiCellRange(kept)

    @staticmethod
    def _check_bounds(row, col):
        if row < 1 or col < 1:
            raise GridProviderError(f"Cell ({row}, {col}) is outside the sheet")
