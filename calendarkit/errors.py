# calendarkit/errors.py - exceptions raised by the calendar engine


class CalendarError(Exception):
    """Base class for every error the calendar engine raises."""


class InvalidCallbackData(CalendarError, ValueError):
    """A button token could not be decoded into a navigation intent."""

    def __init__(self, token, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid calendar callback {token!r}: {reason}")


class InvalidCalendarArgument(CalendarError, ValueError):
    """A caller passed a month, view or weekday table the builder can't use."""
