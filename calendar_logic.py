"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
import logging
from collections.abc import Sequence
from datetime import MAXYEAR, MINYEAR

logger = logging.getLogger(__name__)

DAY_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

Cell = int | None
Week = tuple[Cell, ...]
Grid = tuple[Week, ...]

# Sunday-first weeks; calendar.SUNDAY == 6
_CAL = calendar.Calendar(firstweekday=calendar.SUNDAY)


class CalendarError(ValueError):
    """Base class for rejected calendar requests."""

    code = "calendar_error"

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


class InvalidMonth(CalendarError):
    code = "invalid_month"


class InvalidYear(CalendarError):
    code = "invalid_year"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check(year: int, month: int) -> None:
    if not _is_int(year) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidYear(
            f"year must be an integer in [{MINYEAR}, {MAXYEAR}], got {year!r}", year,
        )
    if not _is_int(month) or not 1 <= month <= 12:
        raise InvalidMonth(f"month must be an integer in [1, 12], got {month!r}", month)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    _check(year, month)
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Return the weekday of the 1st, 0 = Sunday … 6 = Saturday."""
    _check(year, month)
    # monthrange counts from Monday == 0
    return (calendar.monthrange(year, month)[0] + 1) % 7


def build_grid(year: int, month: int) -> Grid:
    """Return the Sunday-first week grid for the given month.

    Each cell is a day number (1–31) or None for the leading and trailing
    slots. Only as many weeks as needed are produced (4 to 6), each with
    exactly 7 cells; days of the adjacent months are never filled in.

    Raises InvalidYear / InvalidMonth for requests outside the Gregorian
    range the standard library can represent.
    """
    _check(year, month)

    grid: list[Week] = []
    row: list[Cell] = []
    for d in _CAL.itermonthdays(year, month):
        row.append(d if d != 0 else None)
        if len(row) == 7:
            grid.append(tuple(row))
            row = []
    logger.debug("built %d-%02d grid with %d weeks", year, month, len(grid))
    return tuple(grid)


def validate_headers(headers: Sequence[str]) -> tuple[str, ...]:
    """Return the header labels as a tuple, requiring exactly one per weekday."""
    labels = tuple(headers)
    if len(labels) != 7:
        raise ValueError(f"Expected 7 weekday headers, got {len(labels)}")
    return labels


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier.

    Raises InvalidYear / InvalidMonth for an invalid input and InvalidYear
    when stepping back from January of year 1.
    """
    _check(year, month)
    result = (year - 1, 12) if month == 1 else (year, month - 1)
    _check(*result)
    return result


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later, checked like prev_month."""
    _check(year, month)
    result = (year + 1, 1) if month == 12 else (year, month + 1)
    _check(*result)
    return result
