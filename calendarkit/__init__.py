# calendarkit - inline month calendar for Telegram bots
from .callback_data import IGNORE, Action, NavigationIntent, decode, encode, is_ignore, try_decode
from .errors import CalendarError, InvalidCalendarArgument, InvalidCallbackData
from .keyboard import Button, CalendarView, build_calendar
from .navigation import CalendarDate, apply_intent, handle_navigation, next_month, prev_month
from .weekdays import weekday_labels
