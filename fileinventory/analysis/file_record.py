#!/usr/bin/env python3
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

COLUMNS = (
    "FullPath",
    "Name",
    "SizeMB",
    "Owner",
    "LastAccessTime",
    "Extension",
    "Active",
    "Unwanted",
    "ContainsLinks",
)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass(frozen=True)
class FileRecord:
    full_path: str
    name: str
    size_mb: float
    owner: str
    last_access_time: datetime
    extension: str
    active: bool
    unwanted: bool
    contains_links: bool = False

    def dedup_key(self) -> Tuple[str, str, float]:
        return self.owner, self.name, self.size_mb

    def to_row(self) -> List[str]:
        return [
            self.full_path,
            self.name,
            f"{self.size_mb:.2f}",
            self.owner,
            self.last_access_time.strftime(TIMESTAMP_FORMAT),
            self.extension,
            str(self.active),
            str(self.unwanted),
            str(self.contains_links),
        ]
