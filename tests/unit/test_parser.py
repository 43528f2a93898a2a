"""Tests for the row parser."""

from datetime import datetime

import pytest

from app.models.metrics.catalog import Layout
from app.services.metrics.parser import (
    coerce_number,
    normalize_time_separator,
    parse_row,
    parse_timestamp,
)


class TestCoerceNumber:
    def test_number_passthrough(self):
        assert coerce_number(95) == 95.0
        assert coerce_number(0.05) == 0.05

    def test_numeric_string_matches_number(self):
        for text, number in [("95", 95), ("0.05", 0.05), (" 42 ", 42), ("1,250", 1250)]:
            assert coerce_number(text) == coerce_number(number)

    def test_empty_and_na_are_zero(self):
        for text in ["", "   ", "N/A", "n/a"]:
            assert coerce_number(text) == 0

    def test_unparseable_is_zero(self):
        assert coerce_number("fast") == 0

    def test_non_finite_is_zero(self):
        assert coerce_number("nan") == 0
        assert coerce_number(float("inf")) == 0

    def test_seconds_scaled_to_ms(self):
        assert coerce_number("1.2 s", timed=True) == pytest.approx(1200)
        assert coerce_number("3s", timed=True) == pytest.approx(3000)

    def test_ms_suffix_unchanged(self):
        assert coerce_number("250 ms", timed=True) == 250

    def test_timed_number_passthrough(self):
        assert coerce_number(1200, timed=True) == 1200
        assert coerce_number("1200", timed=True) == 1200

    def test_suffix_only_scaled_for_timed_fields(self):
        assert coerce_number("1.2 s") == pytest.approx(1.2)

    def test_trailing_text_ignored(self):
        assert coerce_number("95%") == 95
        assert coerce_number("0.1 score") == pytest.approx(0.1)
        assert coerce_number("-3e2 px") == -300

    def test_unknown_time_unit_keeps_number(self):
        assert coerce_number("1.2 sec", timed=True) == pytest.approx(1.2)

    def test_leading_text_is_unparseable(self):
        assert coerce_number("approx 95") == 0
        assert coerce_number("1e999") == 0


class TestParseTimestamp:
    def test_dotted_time(self):
        ts = parse_timestamp("12/25/2024, 14.30")
        assert ts.date().isoformat() == "2024-12-25"
        assert (ts.hour, ts.minute) == (14, 30)

    def test_only_last_pair_rewritten(self):
        assert normalize_time_separator("10.15 - 14.30") == "10.15 - 14:30"
        assert normalize_time_separator("12/25/2024, 9.05") == "12/25/2024, 9:05"

    def test_dotted_time_with_seconds(self):
        assert normalize_time_separator("12/25/2024, 14.30.15") == "12/25/2024, 14:30:15"
        assert parse_timestamp("12/25/2024, 14.30.15") == datetime(2024, 12, 25, 14, 30, 15)

    def test_dotted_date_untouched(self):
        assert normalize_time_separator("25.12.2024") == "25.12.2024"

    def test_colon_time_untouched(self):
        assert normalize_time_separator("12/25/2024, 14:30") == "12/25/2024, 14:30"

    def test_iso(self):
        assert parse_timestamp("2024-12-25T14:30:00") == datetime(2024, 12, 25, 14, 30)

    def test_date_only(self):
        assert parse_timestamp("1/5/2025") == datetime(2025, 1, 5)

    def test_invalid_falls_back_to_now(self):
        before = datetime.now()
        ts = parse_timestamp("yesterday")
        assert before <= ts <= datetime.now()

    def test_missing_falls_back_to_now(self):
        before = datetime.now()
        assert parse_timestamp(None) >= before


class TestParseRow:
    def test_combined_row(self, make_row):
        point = parse_row(make_row())
        assert point.layout == Layout.COMBINED
        assert point.date == "2024-12-25"
        assert point.performance == 95
        assert point.accessibility == 88
        assert point.fcp == pytest.approx(1200)
        assert point.speed_index == pytest.approx(3100)
        assert point.tbt == 150
        assert point.cls == 0.05
        assert point.fid == 0
        assert point.mobile_performance is None

    def test_string_and_number_rows_agree(self, make_row):
        as_text = parse_row(make_row(Performance="95", **{"Largest Contentful Paint": "2400"}))
        as_number = parse_row(make_row(Performance=95, **{"Largest Contentful Paint": 2400}))
        assert as_text == as_number

    def test_missing_required_column(self, make_row):
        row = make_row()
        del row["SEO"]
        assert parse_row(row) is None

    def test_wrong_value_shape(self, make_row):
        for bad in [None, True, ["95"], {"v": 95}]:
            assert parse_row(make_row(Performance=bad)) is None

    def test_na_value_kept_as_zero(self, make_row):
        point = parse_row(make_row(SEO="N/A", **{"Total Blocking Time": ""}))
        assert point.seo == 0
        assert point.tbt == 0

    def test_optional_fid(self, make_row):
        point = parse_row(make_row(**{"First Input Delay": "16 ms"}))
        assert point.fid == 16

    def test_missing_timestamp_uses_today(self, make_row):
        point = parse_row(make_row(timestamp=None))
        assert point.date == datetime.now().date().isoformat()

    def test_split_row(self, make_split_row):
        point = parse_row(make_split_row())
        assert point.layout == Layout.SPLIT
        assert point.performance == 90
        assert point.mobile_performance == 70
        assert point.mobile_fid == 0

    def test_non_mapping(self):
        assert parse_row(["95", "88"]) is None
