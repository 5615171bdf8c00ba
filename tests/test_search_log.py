from __future__ import annotations

import csv
from datetime import datetime, timezone

from server.search_log import CSV_HEADER, SearchLogWriter
from tests.conftest import make_candidate


def read_rows(path):
    with path.open(newline="", encoding="utf-8") as fp:
        return list(csv.reader(fp))


def test_header_written_once(tmp_path):
    path = tmp_path / "nested" / "log.csv"
    writer = SearchLogWriter(path)
    writer.append("gravity", make_candidate(1, title="Gravity, explained", views=5))
    writer.append("orbits", None)

    rows = read_rows(path)
    assert rows[0] == CSV_HEADER
    assert rows[1][1:] == ["gravity", "video000001", "Gravity, explained", "Test Channel", "5"]
    assert rows[2][1:] == ["orbits", "", "", "", ""]


def test_header_added_to_existing_empty_file(tmp_path):
    path = tmp_path / "log.csv"
    path.touch()
    when = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
    row = SearchLogWriter(path).append("tides", None, timestamp=when)

    assert row[0] == "2025-03-01T12:00:00+00:00"
    assert read_rows(path) == [CSV_HEADER, row]
