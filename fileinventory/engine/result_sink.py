import threading
from typing import List

from fileinventory.analysis.file_record import FileRecord


class RecordSink:
    """Append-only record collection shared by all workers"""

    def __init__(self):
        self._records: List[FileRecord] = []
        self._lock = threading.Lock()

    def add(self, record: FileRecord):
        with self._lock:
            self._records.append(record)

    def snapshot(self) -> List[FileRecord]:
        with self._lock:
            return list(self._records)

    def __len__(self):
        with self._lock:
            return len(self._records)
