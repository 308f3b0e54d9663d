from openpyxl.styles import Font, Border, Side, Alignment, PatternFill
from openpyxl.utils import get_column_letter

from constants import TITLE_FONT_SIZE, BACKGROUND_COLOR, VALUE_CELL_COLOR

THIN = Side(style="thin")

TITLE_FONT = Font(bold=True, size=TITLE_FONT_SIZE)

CENTER = Alignment(horizontal="center", vertical="center")

BOX = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)

BACKGROUND_FILL = PatternFill(fill_type="solid", start_color=BACKGROUND_COLOR, end_color=BACKGROUND_COLOR)
VALUE_FILL = PatternFill(fill_type="solid", start_color=VALUE_CELL_COLOR, end_color=VALUE_CELL_COLOR)


def write_cell(ws, row, col, value=None, font=None, align=None, border=None, fill=None):
    cell = ws.cell(row=row, column=col)
    if value is not None:
        cell.value = value
    if font:
        cell.font = font
    if align:
        cell.alignment = align
    if border:
        cell.border = border
    if fill:
        cell.fill = fill
    return cell


def merge_and_style(ws, r1, c1, r2, c2, value=None, font=None, align=None, border=None, fill=None):
    unmerge_overlapping(ws, r1, c1, r2, c2)
    ws.merge_cells(start_row=r1, start_column=c1, end_row=r2, end_column=c2)

    for r in range(r1, r2 + 1):
        for c in range(c1, c2 + 1):
            write_cell(ws, r, c, font=font, align=align, border=border, fill=fill)

    if value is not None:
        ws.cell(row=r1, column=c1).value = value


def unmerge_overlapping(ws, r1, c1, r2, c2):
    for merged in list(ws.merged_cells.ranges):
        if merged.min_row > r2 or merged.max_row < r1:
            continue
        if merged.min_col > c2 or merged.max_col < c1:
            continue
        ws.unmerge_cells(str(merged))


def fill_range(ws, r1, c1, r2, c2, fill):
    for row in ws.iter_rows(min_row=r1, max_row=r2, min_col=c1, max_col=c2):
        for cell in row:
            cell.fill = fill


def cell_ref(row, col):
    return f"{get_column_letter(col)}{row}"


def display_width(value):
    if value is None:
        return 0
    text = str(value)
    return max((len(line) for line in text.splitlines()), default=0)
