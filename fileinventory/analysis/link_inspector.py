"""
Hyperlink detection inside spreadsheet documents
"""

import logging
from typing import Optional

from openpyxl import load_workbook

from fileinventory.errors import LinkInspectionError
from fileinventory.utils.timeouts import with_timeout

logger = logging.getLogger("fileinventory")


def workbook_has_hyperlinks(path: str) -> bool:
    """
    Open a workbook and report whether any worksheet carries a hyperlink.

    Worksheets are visited in workbook order and the scan stops at the
    first hyperlinked cell. Hyperlinks are only materialised on cells in
    normal (not read-only) mode, so the workbook is fully loaded.
    """
    wb = load_workbook(path, data_only=True)
    try:
        for ws in wb.worksheets:
            for row in ws.iter_rows():
                for cell in row:
                    if cell.hyperlink is not None:
                        logger.debug(
                            f"Hyperlink found in {path} [{ws.title}!{cell.coordinate}]"
                        )
                        return True
        return False
    finally:
        wb.close()


class LinkInspector:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def contains_links(self, path: str) -> bool:
        try:
            return with_timeout(workbook_has_hyperlinks, self.timeout, path)
        except Exception as e:
            raise LinkInspectionError(f"{path}: {e}") from e
