from dotenv import load_dotenv
load_dotenv()

import logging
import pathlib
import os

logging.info("Initializing constants")

CURRENT_WORKING_DIRECTORY = pathlib.Path(__file__).parent.resolve()


def _int_from_env(key, default):
    raw = os.environ.get(key, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise EnvironmentError(f"Environment variable {key} must be an integer, got {raw!r}")


SHEET_NAME = os.environ.get('SHEET_NAME', 'Settings')
SHEET_TITLE = os.environ.get('SHEET_TITLE', 'Settings Menu')
SETTING_SPACING = _int_from_env('SETTING_SPACING', 1)
HEADER_ROWS = _int_from_env('HEADER_ROWS', 1)

LOG_DIRECTORY = os.environ.get('LOG_DIRECTORY', os.path.join(CURRENT_WORKING_DIRECTORY, 'logs'))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Column layout of one setting row
VALUE_COLUMN = 2

SETTING_ROWS = 1
SETTING_COLUMNS = 3

TITLE_FONT_SIZE = 16
BACKGROUND_COLOR = "D3D3D3"
VALUE_CELL_COLOR = "FFFFFF"
VALUE_COLUMN_PADDING = 4
MIN_COLUMN_WIDTH = 8

# Inline list validations are capped by Excel
MAX_LIST_FORMULA_LENGTH = 255
