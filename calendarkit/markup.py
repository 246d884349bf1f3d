# calendarkit/markup.py - bridge between button grids and python-telegram-bot
import logging

from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from telegram.error import TelegramError

from .keyboard import CalendarView, build_calendar

logger = logging.getLogger(__name__)


def to_inline_keyboard(grid) -> InlineKeyboardMarkup:
    keyboard = [[InlineKeyboardButton(cell.label, callback_data=cell.token) for cell in row] for row in grid]
    return InlineKeyboardMarkup(keyboard)


def calendar_markup(year: int, month: int, view=CalendarView.DEFAULT, weekdays=None) -> InlineKeyboardMarkup:
    return to_inline_keyboard(build_calendar(year, month, view, weekdays))


async def send_calendar(bot, chat_id, text: str, year: int, month: int, view=CalendarView.DEFAULT, weekdays=None):
    """Send `text` to `chat_id` with the month's calendar attached.

    The markup is built before anything is sent, so bad arguments fail
    without touching the chat. Delivery errors are logged and re-raised.
    """
    markup = calendar_markup(year, month, view, weekdays)
    try:
        return await bot.send_message(chat_id=chat_id, text=text, reply_markup=markup)
    except TelegramError:
        logger.exception('Failed to send calendar %s-%s to chat %s', year, month, chat_id)
        raise
