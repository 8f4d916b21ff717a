import logging
import os
from datetime import datetime, timedelta

import pytest
from openpyxl import Workbook


@pytest.fixture(autouse=True)
def reset_inventory_logger():
    yield
    logging.getLogger("fileinventory").handlers.clear()


def _set_access_time(path, days_ago, now=None):
    now = now or datetime.now()
    ts = (now - timedelta(days=days_ago)).timestamp()
    os.utime(path, (ts, ts))


@pytest.fixture
def set_access_time():
    return _set_access_time


@pytest.fixture
def touch():
    def _touch(path, size=0, accessed_days_ago=1):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        _set_access_time(path, accessed_days_ago)
        return path

    return _touch


@pytest.fixture
def make_workbook():
    def _make(path, with_link=False):
        wb = Workbook()
        ws = wb.active
        ws.title = "Summary"
        ws["A1"] = "plain text"

        other = wb.create_sheet("Sources")
        other["B2"] = "report"
        if with_link:
            other["B2"].hyperlink = "https://example.com/report"

        wb.save(path)
        return path

    return _make


@pytest.fixture
def fixed_owner(monkeypatch):
    # not every CI container has a passwd entry for its uid
    monkeypatch.setattr(
        "fileinventory.accessors.local_file_accessor.LocalFileAccessor.get_owner",
        lambda self, path: "alice",
    )
