from datetime import date, datetime

import pytest

from deskbot.periods import (
    last_month_dates,
    parse_custom_date_range,
    resolve_period,
    this_month_dates,
    this_week_dates,
    this_year_dates,
)

# 2024-01-17 is a Wednesday.
WEDNESDAY = datetime(2024, 1, 17, 15, 30)


def test_this_week_runs_sunday_to_saturday():
    assert this_week_dates(WEDNESDAY) == ("2024-01-14", "2024-01-20")


def test_this_week_on_sunday_starts_same_day():
    assert this_week_dates(date(2024, 1, 14)) == ("2024-01-14", "2024-01-20")


def test_this_week_on_saturday_ends_same_day():
    assert this_week_dates(date(2024, 1, 20)) == ("2024-01-14", "2024-01-20")


def test_this_week_spans_year_boundary():
    assert this_week_dates(date(2025, 1, 1)) == ("2024-12-29", "2025-01-04")


def test_this_month_handles_leap_february():
    assert this_month_dates(date(2024, 2, 10)) == ("2024-02-01", "2024-02-29")
    assert this_month_dates(date(2023, 2, 10)) == ("2023-02-01", "2023-02-28")


def test_this_year_bounds():
    assert this_year_dates(WEDNESDAY) == ("2024-01-01", "2024-12-31")


def test_last_month_in_january_rolls_back_year():
    assert last_month_dates(date(2024, 1, 5)) == ("2023-12-01", "2023-12-31")


def test_last_month_mid_year():
    assert last_month_dates(date(2024, 3, 31)) == ("2024-02-01", "2024-02-29")


def test_custom_range_takes_first_two_dates():
    assert parse_custom_date_range(
        "from 2024-01-01 to 2024-01-31 and 2024-02-01"
    ) == ("2024-01-01", "2024-01-31")


def test_custom_range_needs_two_dates():
    assert parse_custom_date_range("from 2024-01-01") is None


def test_custom_range_keeps_reversed_and_invalid_dates():
    assert parse_custom_date_range("between 2024-12-31 and 2024-01-01") == ("2024-12-31", "2024-01-01")
    assert parse_custom_date_range("from 2024-13-45 to 2024-02-30") == ("2024-13-45", "2024-02-30")


@pytest.mark.parametrize(
    ("message", "label", "start", "end"),
    [
        ("payroll this week", "This Week", "2024-01-14", "2024-01-20"),
        ("payroll this month", "This Month", "2024-01-01", "2024-01-31"),
        ("earnings this year", "This Year", "2024-01-01", "2024-12-31"),
        ("salary last month", "Last Month", "2023-12-01", "2023-12-31"),
    ],
)
def test_resolve_named_periods(message, label, start, end):
    result = resolve_period(message, WEDNESDAY)
    assert result is not None
    assert (result.label, result.start, result.end) == (label, start, end)
    assert result.start <= result.end


def test_resolve_prefers_this_month_over_custom_dates():
    result = resolve_period("payroll this month from 2020-01-01 to 2020-02-01", WEDNESDAY)
    assert result.label == "This Month"


def test_resolve_custom_range_label():
    result = resolve_period("payroll between 2024-01-01 and 2024-01-31", WEDNESDAY)
    assert result.start == "2024-01-01"
    assert result.end == "2024-01-31"
    assert result.label == "Custom Period (2024-01-01 to 2024-01-31)"


def test_resolve_custom_dates_require_trigger_word():
    assert resolve_period("payroll 2024-01-01 2024-01-31", WEDNESDAY) is None


def test_resolve_returns_none_without_period():
    assert resolve_period("what's my salary", WEDNESDAY) is None
