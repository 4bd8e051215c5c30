"""Unit tests for the puzzle day count."""

from datetime import date

import pytest

from domain.calendar import day_count, supported_years


@pytest.mark.parametrize("year", [2015, 2019, 2022])
def test_past_years_have_every_day(year):
    assert day_count(year, date(2023, 6, 15)) == 25


@pytest.mark.parametrize("year", [2024, 2030])
def test_future_years_have_no_days(year):
    assert day_count(year, date(2023, 12, 20)) == 0


@pytest.mark.parametrize("today", [date(2023, 1, 1), date(2023, 11, 30)])
def test_current_year_before_december_has_no_days(today):
    assert day_count(2023, today) == 0


@pytest.mark.parametrize("today", [date(2023, 12, 1), date(2023, 12, 31)])
def test_current_year_in_december_has_every_day(today):
    assert day_count(2023, today) == 25


def test_defaults_to_today():
    today = date.today()
    assert day_count(today.year - 1) == 25
    assert day_count(today.year + 1) == 0


def test_supported_years_start_at_first_event():
    assert supported_years(date(2017, 3, 1)) == [2015, 2016, 2017]
