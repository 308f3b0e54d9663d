import logging
import os
from datetime import datetime
from io import BytesIO

from constants import LOG_DIRECTORY, LOG_LEVEL


def configure_logging(log_directory=LOG_DIRECTORY, level=LOG_LEVEL):
    if not os.path.exists(log_directory):
        os.makedirs(log_directory)

    log_file_path = os.path.join(log_directory, datetime.today().strftime('%d-%m-%Y')+'-logs.log')

    logger = logging.getLogger()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file_path):
            return logger

    file_handler = logging.FileHandler(log_file_path)

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    file_handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.addHandler(file_handler)

    logging.info(f"Logs are being saved to: {file_handler.baseFilename}")
    return logger


def workbook_bytes(grid):
    output = BytesIO()
    grid.save(output)
    output.seek(0)
    return output


def settings_as_dict(menu):
    return dict(menu.get_all())
