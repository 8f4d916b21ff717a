#!/usr/bin/env python3

import logging
import os
from datetime import datetime
from typing import Iterable, Optional

from fileinventory.accessors.file_accessor import FileAccessor
from fileinventory.analysis.file_record import FileRecord
from fileinventory.analysis.link_inspector import LinkInspector
from fileinventory.errors import LinkInspectionError, PerFileProcessingError
from fileinventory.utils.logger import log_file_record

logger = logging.getLogger("fileinventory")

BYTES_PER_MB = 1024 * 1024
DAYS_PER_MONTH = 30  # uniform month, not calendar accurate
SECONDS_PER_DAY = 24 * 60 * 60
SPREADSHEET_EXT = ".xlsx"


def size_in_mb(size_bytes: int) -> float:
    return round(size_bytes / BYTES_PER_MB, 2)


def is_active(last_access_ts: float, now_ts: float, expiration_months: int) -> bool:
    """Age is measured in epoch seconds; local time is only for display."""
    window = expiration_months * DAYS_PER_MONTH * SECONDS_PER_DAY
    return (now_ts - last_access_ts) < window


def is_unwanted(extension: str, unwanted_extensions: Iterable[str]) -> bool:
    return extension.lower() in unwanted_extensions


class FileClassifier:
    def __init__(
            self,
            cfg,
            file_accessor: FileAccessor,
            link_inspector: LinkInspector,
            now: Optional[datetime] = None,
    ):
        self.cfg = cfg
        self.file_accessor = file_accessor
        self.link_inspector = link_inspector

        # one reference time for every worker in the run
        self.now = now or datetime.now()

        self.expiration_months = cfg.scanning.expiration_months
        self.unwanted_extensions = cfg.unwanted_extensions

    def classify(self, path: str) -> FileRecord:
        name = os.path.basename(path)
        extension = os.path.splitext(name)[1]

        st = self.file_accessor.stat(path)
        try:
            last_access = datetime.fromtimestamp(st.st_atime)
        except (OverflowError, OSError, ValueError) as e:
            raise PerFileProcessingError(path, e) from e

        size_mb = size_in_mb(st.st_size)
        active = is_active(st.st_atime, self.now.timestamp(), self.expiration_months)
        unwanted = is_unwanted(extension, self.unwanted_extensions)
        owner = self.file_accessor.get_owner(path)

        contains_links = False
        if active and extension.lower() == SPREADSHEET_EXT:
            contains_links = self._inspect_links(path)

        record = FileRecord(
            full_path=path,
            name=name,
            size_mb=size_mb,
            owner=owner,
            last_access_time=last_access,
            extension=extension,
            active=active,
            unwanted=unwanted,
            contains_links=contains_links,
        )
        log_file_record(logger, record)
        return record

    def _inspect_links(self, path: str) -> bool:
        try:
            return self.link_inspector.contains_links(path)
        except LinkInspectionError as e:
            logger.warning(f"Link inspection failed, assuming no links: {e}")
            return False
