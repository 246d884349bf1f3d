# calendarkit/utils.py - Gregorian date helpers shared by the builder and codec
import calendar

from .errors import InvalidCalendarArgument


def check_year(year) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidCalendarArgument(f"year must be an integer, got {year!r}")
    return year


def check_month(month) -> int:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidCalendarArgument(f"month must be an integer in 1..12, got {month!r}")
    return month


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month, leap-year aware (proleptic Gregorian)."""
    check_month(month)
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st with Monday = 0 ... Sunday = 6."""
    check_month(month)
    # calendar.weekday maps years outside 1..9999 onto the 400-year cycle
    return calendar.weekday(year, month, 1)


def chunk(items, size: int):
    """Split a sequence into consecutive lists of `size`; the last may be shorter."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]
