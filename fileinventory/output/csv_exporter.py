"""
Tabular export of file records
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from fileinventory.analysis.file_record import COLUMNS, FileRecord
from fileinventory.errors import OutputWriteError

logger = logging.getLogger("fileinventory")


class CsvExporter:
    def __init__(self, output_file: str):
        self.output_path = Path(output_file)

    def check_writable(self):
        parent = self.output_path.parent
        if not parent.is_dir():
            raise OutputWriteError(f"Output directory does not exist: {parent}")
        if not os.access(parent, os.W_OK):
            raise OutputWriteError(f"Output directory is not writable: {parent}")
        if self.output_path.is_dir():
            raise OutputWriteError(f"Output path is a directory: {self.output_path}")

    def write(self, records: Iterable[FileRecord]) -> int:
        """
        Write all records, replacing any existing file.

        Rows go to a temporary file beside the destination which is renamed
        over it only once complete, so a failed run never leaves a
        truncated file behind.
        """
        self.check_writable()

        count = 0
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                    mode="w",
                    newline="",
                    encoding="utf-8",
                    dir=self.output_path.parent,
                    prefix=f".{self.output_path.name}.",
                    suffix=".tmp",
                    delete=False,
            ) as fh:
                tmp_path = fh.name
                writer = csv.writer(fh)
                writer.writerow(COLUMNS)
                for record in records:
                    writer.writerow(record.to_row())
                    count += 1

            os.replace(tmp_path, self.output_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise OutputWriteError(
                f"Cannot write {self.output_path}: {e}"
            ) from e

        logger.info(f"Wrote {count} rows to {self.output_path}")
        return count
