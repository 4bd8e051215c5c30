"""Puzzle calendar rules."""

from datetime import date

from domain.models.identifiers import LAST_DAY

FIRST_YEAR = 2015


def day_count(year: int, today: date | None = None) -> int:
    """
    Number of puzzle days unlocked for ``year`` as of ``today``.

    Past years and the current year from December on have every day;
    future years and the current year before December have none.
    """
    today = today or date.today()

    if year < today.year or (year == today.year and today.month == 12):
        return LAST_DAY
    if year > today.year or (year == today.year and today.month < 12):
        return 0
    return min(today.day, LAST_DAY)


def supported_years(today: date | None = None) -> list[int]:
    """Every event year from the first one up to the current year."""
    today = today or date.today()
    return list(range(FIRST_YEAR, today.year + 1))
