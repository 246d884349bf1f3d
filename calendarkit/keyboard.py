# calendarkit/keyboard.py - month calendar as rows of buttons for an inline keyboard
from dataclasses import dataclass
from enum import Enum
from typing import List

from .callback_data import IGNORE, Action, day_token, nav_token
from .errors import InvalidCalendarArgument
from .utils import check_month, check_year, chunk, days_in_month, first_weekday
from .weekdays import DEFAULT_CULTURE, weekday_labels

BLANK = ' '
PREV_LABEL = '<'
NEXT_LABEL = '>'


class CalendarView(str, Enum):
    DEFAULT = 'default'   # day buttons only, rows of 7, last row may be short
    WEEKLY = 'weekly'     # weekday header, padded rows, year-month label


@dataclass(frozen=True)
class Button:
    label: str
    token: str


Grid = List[List[Button]]


def _ignore(label: str = BLANK) -> Button:
    return Button(label, IGNORE)


def _day_buttons(year: int, month: int) -> List[Button]:
    return [Button(str(d), day_token(year, month, d)) for d in range(1, days_in_month(year, month) + 1)]


def coerce_view(view) -> CalendarView:
    try:
        return CalendarView(view)
    except ValueError:
        raise InvalidCalendarArgument(f"unknown calendar view {view!r}") from None


def build_default(year: int, month: int) -> Grid:
    kb = chunk(_day_buttons(year, month), 7)
    kb.append([
        Button(PREV_LABEL, nav_token(Action.PREV, year, month)),
        Button(NEXT_LABEL, nav_token(Action.NEXT, year, month)),
    ])
    return kb


def build_weekly(year: int, month: int, weekdays) -> Grid:
    kb = [[_ignore(label) for label in weekdays]]
    row = [_ignore() for _ in range(first_weekday(year, month))]
    for button in _day_buttons(year, month):
        row.append(button)
        if len(row) == 7:
            kb.append(row)
            row = []
    if row:
        row.extend(_ignore() for _ in range(7 - len(row)))
        kb.append(row)
    kb.append([
        Button(PREV_LABEL, nav_token(Action.PREV, year, month)),
        _ignore(f"{year}-{month}"),
        Button(NEXT_LABEL, nav_token(Action.NEXT, year, month)),
    ])
    return kb


def build_calendar(year: int, month: int, view=CalendarView.DEFAULT, weekdays=None) -> Grid:
    """Build the button grid for one month.

    The prev/next tokens carry the month being shown; the month to move to is
    worked out by navigation.apply_intent when the button comes back. An
    out-of-range month is rejected here, never wrapped.
    """
    check_year(year)
    check_month(month)
    view = coerce_view(view)
    if weekdays is None:
        weekdays = weekday_labels(DEFAULT_CULTURE)
    weekdays = tuple(weekdays)
    if len(weekdays) != 7:
        raise InvalidCalendarArgument(f"expected 7 weekday labels, got {len(weekdays)}")

    if view is CalendarView.WEEKLY:
        return build_weekly(year, month, weekdays)
    return build_default(year, month)
