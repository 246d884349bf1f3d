import pytest

from calendarkit.callback_data import IGNORE, Action, NavigationIntent
from calendarkit.errors import InvalidCalendarArgument, InvalidCallbackData
from calendarkit.keyboard import CalendarView
from calendarkit.navigation import CalendarDate, apply_intent, handle_navigation, next_month, prev_month


def test_prev_month():
    assert prev_month(CalendarDate(2024, 1)) == CalendarDate(2023, 12)
    assert prev_month(CalendarDate(2024, 6)) == CalendarDate(2024, 5)
    assert prev_month(CalendarDate(1, 1)) == CalendarDate(0, 12)


def test_next_month():
    assert next_month(CalendarDate(2024, 12)) == CalendarDate(2025, 1)
    assert next_month(CalendarDate(2024, 6)) == CalendarDate(2024, 7)


def test_calendar_date_rejects_bad_month():
    with pytest.raises(InvalidCalendarArgument):
        CalendarDate(2024, 13)


def test_apply_intent():
    assert apply_intent(NavigationIntent(Action.PREV, 2024, 1)) == CalendarDate(2023, 12)
    assert apply_intent(NavigationIntent(Action.NEXT, 2024, 12)) == CalendarDate(2025, 1)
    assert apply_intent(NavigationIntent(Action.DAY, 2024, 3, 15)) == CalendarDate(2024, 3)


def test_handle_navigation_next():
    target, kb = handle_navigation('calendar:next:2024-12')
    assert target == CalendarDate(2025, 1)
    assert kb[-1][0].token == 'calendar:prev:2025-1'
    assert kb[0][0].token == 'calendar:day:2025-01-01'


def test_handle_navigation_weekly_prev():
    target, kb = handle_navigation('calendar:prev:2024-3', CalendarView.WEEKLY, ('a', 'b', 'c', 'd', 'e', 'f', 'g'))
    assert target == CalendarDate(2024, 2)
    assert [b.label for b in kb[0]] == ['a', 'b', 'c', 'd', 'e', 'f', 'g']
    assert kb[-1][1].label == '2024-2'


def test_handle_navigation_round_trip_through_buttons():
    _, kb = handle_navigation('calendar:next:2024-6')
    target, _ = handle_navigation(kb[-1][0].token)
    assert target == CalendarDate(2024, 6)


@pytest.mark.parametrize('token', [IGNORE, 'calendar:prev', 'calendar:prev:abcd-1'])
def test_handle_navigation_rejects(token):
    with pytest.raises(InvalidCallbackData):
        handle_navigation(token)


def test_calendar_date_rejects_non_integer_year():
    with pytest.raises(InvalidCalendarArgument):
        CalendarDate(2024.0, 5)
