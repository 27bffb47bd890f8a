# utils/file_utils.py

import logging
import os
from datetime import date
from config import DATA_DIR
from utils.time_utils import file_date

STALE_EXTENSIONS = (".csv", ".txt")
STALE_MARKERS = ("data", "List")


def is_stale_data_file(filename):
    return (any(ext in filename for ext in STALE_EXTENSIONS)
            and any(marker in filename for marker in STALE_MARKERS))


def remove_old_files(data_dir=DATA_DIR, today=None):
    """Delete data files from previous days. Returns the removed file names."""
    today = today or date.today()
    removed = []

    try:
        for filename in sorted(os.listdir(data_dir)):
            path = os.path.join(data_dir, filename)
            if not os.path.isfile(path):
                continue
            if file_date(path) != today and is_stale_data_file(filename):
                os.remove(path)
                removed.append(filename)
    except OSError as e:
        logging.error(f"Unable to perform cleanup action: {e}")

    if removed:
        logging.info(f"Removed {len(removed)} old file(s) from {data_dir}")
    return removed
