# calendarkit/callback_data.py - encode/decode the callback_data carried by calendar buttons
#
# Tokens (colon separated, always three segments):
#   calendar:prev:<year>-<month>          month of the calendar being shown
#   calendar:next:<year>-<month>
#   calendar:day:<year>-<MM>-<DD>         same format in every view
#   ignore                                headers, padding, labels
import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .errors import InvalidCallbackData
from .utils import days_in_month

PREFIX = 'calendar'
IGNORE = 'ignore'

_YEAR_MONTH = re.compile(r'(-?[0-9]+)-([0-9]+)')
_YEAR_MONTH_DAY = re.compile(r'(-?[0-9]+)-([0-9]+)-([0-9]+)')


class Action(str, Enum):
    PREV = 'prev'
    NEXT = 'next'
    DAY = 'day'


@dataclass(frozen=True)
class NavigationIntent:
    action: Action
    year: int
    month: int
    day: Optional[int] = None


class DecodeResult(NamedTuple):
    intent: Optional[NavigationIntent]
    error: Optional[InvalidCallbackData]

    @property
    def ok(self) -> bool:
        return self.error is None


def nav_token(action, year: int, month: int) -> str:
    return f"{PREFIX}:{Action(action).value}:{year}-{month}"


def day_token(year: int, month: int, day: int) -> str:
    return f"{PREFIX}:{Action.DAY.value}:{year}-{month:02d}-{day:02d}"


def encode(intent: NavigationIntent) -> str:
    action = Action(intent.action)
    if action is Action.DAY:
        if intent.day is None:
            raise ValueError('day intent without a day')
        return day_token(intent.year, intent.month, intent.day)
    return nav_token(action, intent.year, intent.month)


def is_ignore(token) -> bool:
    return token == IGNORE


def decode(token) -> NavigationIntent:
    """Parse a button token into a NavigationIntent.

    Raises InvalidCallbackData for anything outside the grammar above,
    including the `ignore` sentinel. A month outside 1..12 or a day past the
    end of its month is rejected too, so a bad token never turns into a
    plausible but wrong date.
    """
    if not isinstance(token, str):
        raise InvalidCallbackData(token, 'not a string')
    parts = token.split(':')
    if len(parts) != 3:
        raise InvalidCallbackData(token, f'expected 3 segments, got {len(parts)}')
    prefix, action, payload = parts
    if prefix != PREFIX:
        raise InvalidCallbackData(token, f'unknown prefix {prefix!r}')
    try:
        action = Action(action)
    except ValueError:
        raise InvalidCallbackData(token, f'unknown action {action!r}') from None

    pattern = _YEAR_MONTH_DAY if action is Action.DAY else _YEAR_MONTH
    m = pattern.fullmatch(payload)
    if m is None:
        raise InvalidCallbackData(token, f'malformed date {payload!r}')
    try:
        year, month, *rest = map(int, m.groups())
    except ValueError:
        raise InvalidCallbackData(token, 'number too long') from None
    if not 1 <= month <= 12:
        raise InvalidCallbackData(token, f'month {month} out of range')
    if action is not Action.DAY:
        return NavigationIntent(action, year, month)

    day = rest[0]
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidCallbackData(token, f'day {day} out of range')
    return NavigationIntent(action, year, month, day)


def try_decode(token) -> DecodeResult:
    """Like decode() but returns a DecodeResult instead of raising."""
    try:
        return DecodeResult(decode(token), None)
    except InvalidCallbackData as e:
        return DecodeResult(None, e)
