"""
Unit tests for the slug, date and time normalizers.
"""

import re

import pytest

from eventhub.core.errors import InvalidDateError, InvalidTimeError
from eventhub.domain.normalizers import generate_slug, normalize_date, normalize_time

SLUG_SHAPE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class TestGenerateSlug:
    @pytest.mark.parametrize(
        "title, expected",
        [
            ("My Dev Talk!!", "my-dev-talk"),
            ("  PyCon  2025: Jakarta ", "pycon-2025-jakarta"),
            ("--Already-Slugged--", "already-slugged"),
            ("C++ & Rust", "c-rust"),
            ("Café Meetup", "caf-meetup"),
        ],
    )
    def test_slug_examples(self, title, expected):
        assert generate_slug(title) == expected

    def test_empty_title_gives_empty_slug(self):
        assert generate_slug("") == ""
        assert generate_slug("!!!") == ""

    @pytest.mark.parametrize("title", ["Hack Night #4", "AI/ML Summit", "x", "Über 9000 devs"])
    def test_slug_shape(self, title):
        assert SLUG_SHAPE.match(generate_slug(title))

    def test_slug_is_deterministic(self):
        assert generate_slug("Repeat Me!") == generate_slug("Repeat Me!")


class TestNormalizeDate:
    def test_canonical_date_unchanged(self):
        assert normalize_date("2025-01-31") == "2025-01-31"

    def test_datetime_keeps_date_part(self):
        assert normalize_date("2025-01-31T18:00:00") == "2025-01-31"

    def test_utc_suffix(self):
        assert normalize_date("2025-01-31T10:00:00Z") == "2025-01-31"

    def test_offset_converted_to_utc(self):
        assert normalize_date("2025-01-31T23:30:00-05:00") == "2025-02-01"

    @pytest.mark.parametrize(
        "value",
        ["January 31, 2025", "Jan 31, 2025", "31 January 2025", "01/31/2025", "2025/01/31", " 2025-01-31 "],
    )
    def test_written_forms(self, value):
        assert normalize_date(value) == "2025-01-31"

    @pytest.mark.parametrize("value", ["not a date", "2025-02-30", "2025-13-01", ""])
    def test_invalid_dates_raise(self, value):
        with pytest.raises(InvalidDateError):
            normalize_date(value)

    def test_non_string_raises(self):
        with pytest.raises(InvalidDateError):
            normalize_date(None)


class TestNormalizeTime:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2:30 PM", "14:30"),
            ("14:30", "14:30"),
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("12:00", "12:00"),
            ("9:05", "09:05"),
            ("0930", "09:30"),
            ("930", "09:30"),
            ("7:05pm", "19:05"),
            ("7:05 Pm", "19:05"),
            ("11:59 am", "11:59"),
            ("0:15", "00:15"),
            ("  18:45  ", "18:45"),
        ],
    )
    def test_valid_times(self, value, expected):
        assert normalize_time(value) == expected

    @pytest.mark.parametrize("value", ["25:00", "24:00", "9:60", "noon", "1:5", "12:00 XM", "", "123456"])
    def test_invalid_times_raise(self, value):
        with pytest.raises(InvalidTimeError):
            normalize_time(value)

    def test_non_string_raises(self):
        with pytest.raises(InvalidTimeError):
            normalize_time(1430)
