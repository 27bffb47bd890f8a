# utils/time_utils.py

import os
from datetime import datetime


def file_date(path):
    """Calendar date of a file's last modification."""
    return datetime.fromtimestamp(os.stat(path).st_mtime).date()
