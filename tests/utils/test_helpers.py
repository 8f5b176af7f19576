"""Tests for itinerary_form/utils/helpers.py."""

from datetime import date
from re import fullmatch

import pytest

from itinerary_form.utils import parse_int, parse_iso_date, today_str


class TestParseInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("5", 5),
            ("  5", 5),
            ("-2", -2),
            ("+3", 3),
            ("12abc", 12),
            ("3.9", 3),
            (8, 8),
            (2.7, 2),
            ("", None),
            ("abc", None),
            ("   ", None),
            (None, None),
            (True, None),
            (float("nan"), None),
            (float("inf"), None),
        ],
    )
    def test_parse(self, value: object, expected: int | None) -> None:
        assert parse_int(value) == expected


class TestParseIsoDate:
    def test_valid(self) -> None:
        assert parse_iso_date("2026-05-01") == date(2026, 5, 1)

    def test_surrounding_whitespace(self) -> None:
        assert parse_iso_date(" 2026-05-01 ") == date(2026, 5, 1)

    @pytest.mark.parametrize(
        "value",
        ["", "tomorrow", "2026-13-01", "2026-02-30", "20260501", "2026-W18-5", "2026-05-01T10:00"],
    )
    def test_invalid(self, value: str) -> None:
        assert parse_iso_date(value) is None


def test_today_str_format() -> None:
    assert fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", today_str())
