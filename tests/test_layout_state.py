from __future__ import annotations

from excelLayoutState import LayoutState
from menuSettings import SettingSize


def test_place_returns_rows_and_advances_with_spacing() -> None:
    state = LayoutState(start_row=2, spacing=1)

    assert state.place(SettingSize(1, 3)) == 2
    assert state.place(SettingSize(2, 3)) == 4
    assert state.place(SettingSize(1, 5)) == 7

    assert state.row == 9
    assert state.last_row == 7
    assert state.max_columns == 5


def test_nothing_placed_leaves_last_row_above_start() -> None:
    state = LayoutState(start_row=3)
    assert state.last_row == 2
    assert state.max_columns == 0
