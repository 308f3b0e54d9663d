"""
Shared pytest fixtures for the settings menu tests.

Every fixture works on a real in-memory openpyxl workbook.
"""

import pytest
from openpyxl import Workbook

from gridProvider import OpenpyxlGridProvider
from menuSettings import TextSetting, CheckboxSetting, DropdownSetting
from sheetMenu import SheetMenu


@pytest.fixture
def workbook() -> Workbook:
    return Workbook()


@pytest.fixture
def grid() -> OpenpyxlGridProvider:
    return OpenpyxlGridProvider()


@pytest.fixture
def sample_settings():
    return [
        TextSetting("A", "1", "d1"),
        CheckboxSetting("B", False, "d2"),
        DropdownSetting("C", ["low", "medium", "high"], "d3"),
    ]


@pytest.fixture
def menu(grid, sample_settings) -> SheetMenu:
    return SheetMenu({"title_text": "Menu", "row_spacing": 1}, *sample_settings, grid=grid)


@pytest.fixture
def drawn_menu(menu) -> SheetMenu:
    menu.draw()
    return menu
