"""Unit tests for timestamp and date formatting helpers."""

import locale
import re
from datetime import date, datetime

import pytest

from scribe.utils.timestamp import format_date, now


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2026-10-16", "October 16, 2026"),
        ("2024-03-05T09:30:00", "March 5, 2024"),
        (date(2024, 1, 1), "January 1, 2024"),
        (datetime(2023, 12, 31, 23, 59), "December 31, 2023"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.unit
def test_format_date_unparseable_returned_unchanged():
    assert format_date("sometime in spring") == "sometime in spring"


@pytest.mark.unit
def test_format_date_none():
    assert format_date(None) == ""


@pytest.mark.unit
def test_timestamp_formats():
    assert re.fullmatch(r"\d{8}_\d{6}", now())


@pytest.mark.unit
def test_format_date_ignores_locale():
    """Month names stay English under a non-English LC_TIME."""
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE.UTF-8 locale not installed")
    try:
        assert format_date("2024-03-05") == "March 5, 2024"
    finally:
        locale.setlocale(locale.LC_TIME, previous)
