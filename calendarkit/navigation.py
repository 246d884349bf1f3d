# calendarkit/navigation.py - month rollover driven by decoded button presses
import logging
from dataclasses import dataclass
from typing import Tuple

from .callback_data import Action, NavigationIntent, decode
from .keyboard import CalendarView, Grid, build_calendar
from .utils import check_month, check_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int

    def __post_init__(self):
        check_year(self.year)
        check_month(self.month)


def prev_month(current: CalendarDate) -> CalendarDate:
    if current.month == 1:
        return CalendarDate(current.year - 1, 12)
    return CalendarDate(current.year, current.month - 1)


def next_month(current: CalendarDate) -> CalendarDate:
    if current.month == 12:
        return CalendarDate(current.year + 1, 1)
    return CalendarDate(current.year, current.month + 1)


def apply_intent(intent: NavigationIntent) -> CalendarDate:
    """Month the calendar should show after the button behind `intent` is pressed.

    A day selection doesn't move the calendar: its own month comes back.
    """
    current = CalendarDate(intent.year, intent.month)
    action = Action(intent.action)
    if action is Action.PREV:
        return prev_month(current)
    if action is Action.NEXT:
        return next_month(current)
    return current


def handle_navigation(token: str, view=CalendarView.DEFAULT, weekdays=None) -> Tuple[CalendarDate, Grid]:
    """Decode a pressed button and build the calendar it leads to.

    Raises InvalidCallbackData for malformed tokens and for the `ignore`
    sentinel; callers that show decorative cells should filter those first.
    """
    intent = decode(token)
    target = apply_intent(intent)
    logger.debug('calendar %s %s-%s -> %s-%s', intent.action.value, intent.year, intent.month, target.year, target.month)
    return target, build_calendar(target.year, target.month, view, weekdays)
