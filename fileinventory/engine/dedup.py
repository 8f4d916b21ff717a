import logging
from typing import Iterable, List

from fileinventory.analysis.file_record import FileRecord

logger = logging.getLogger("fileinventory")


def deduplicate(records: Iterable[FileRecord]) -> List[FileRecord]:
    """
    Keep the first record seen for each (owner, name, size_mb) key.

    Files with the same owner, name and rounded size in different
    directories are treated as copies of one another and collapse to a
    single row. With more than one worker the collection order follows
    task completion, so which path survives can vary between runs.
    """
    seen = set()
    unique: List[FileRecord] = []

    for record in records:
        key = record.dedup_key()
        if key in seen:
            logger.debug(f"Duplicate dropped: {record.full_path}")
            continue
        seen.add(key)
        unique.append(record)

    return unique
