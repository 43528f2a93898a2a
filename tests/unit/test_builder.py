"""Tests for the series builder."""

import pytest

from app.errors import NoValidDataError
from app.services.metrics.builder import build_series


class TestBuildSeries:
    def test_all_invalid(self, make_row):
        rows = [{"URL": "https://example.com"}, make_row(Performance=None)]
        with pytest.raises(NoValidDataError):
            build_series("Home", rows)

    def test_empty(self):
        with pytest.raises(NoValidDataError):
            build_series("Home", [])

    def test_mixed_rows_sorted(self, make_row):
        rows = [
            make_row("12/27/2024, 09.15", Performance=97),
            make_row("12/25/2024, 14.30", Performance=None),
            make_row("12/20/2024, 08.00", Performance=80),
            make_row("12/26/2024, 10.00", Performance=90),
        ]
        result = build_series("Home", rows)
        assert [p.date for p in result.data] == ["2024-12-20", "2024-12-26", "2024-12-27"]
        assert [p.performance for p in result.data] == [80, 90, 97]

    def test_same_day_keeps_row_order(self, make_row):
        rows = [
            make_row("12/25/2024, 08.00", Performance=70),
            make_row("12/25/2024, 20.00", Performance=75),
        ]
        result = build_series("Home", rows)
        assert [p.performance for p in result.data] == [70, 75]

    def test_latest_uses_first_raw_timestamp(self, make_row):
        rows = [
            make_row("12/27/2024, 09.15", Performance=97),
            make_row("12/20/2024, 08.00", Performance=80),
        ]
        latest = build_series("Home", rows).latest_metrics
        assert latest.timestamp == "2024-12-27T09:15:00"
        assert latest.performance == 97
        assert latest.url == "https://example.com"

    def test_url_falls_back_to_title(self, make_row):
        result = build_series("Home", [make_row(URL="")])
        assert result.url == "Home"
        assert result.name == "Home"
        assert result.latest_metrics.url == "Home"

    def test_website_column(self, make_row):
        row = make_row()
        del row["URL"]
        row["Website"] = "https://example.org"
        assert build_series("Home", [row]).url == "https://example.org"
