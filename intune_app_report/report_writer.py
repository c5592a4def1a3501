import csv
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Iterable, TextIO, Union

from .models import ReportRow

CSV_COLUMNS = ["ApplicationNames", "GroupNames"]


def write_report_csv(rows: Iterable[ReportRow], path: Union[str, Path]) -> Path:
    """
    Write the report and move it into place in one step.

    The file either holds every row or does not exist, never a partial
    report.
    """
    path = Path(path)
    rows = list(rows)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow(row.as_csv_row())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise
    logging.info(f"Saved {len(rows)} rows to {path}")
    return path


def print_app_names(names: Iterable[str], stream: TextIO = None):
    stream = stream or sys.stdout
    for name in names:
        print(name, file=stream)
