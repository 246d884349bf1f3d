# calendarkit/bot.py - demo bot: inline calendar with month navigation
import logging
from datetime import date
from typing import Optional

from telegram import Update, User
from telegram.error import TelegramError
from telegram.ext import ApplicationBuilder, CallbackQueryHandler, CommandHandler, ContextTypes

from . import config
from .callback_data import Action, decode
from .errors import CalendarError
from .keyboard import CalendarView, coerce_view
from .markup import calendar_markup, send_calendar
from .navigation import apply_intent
from .weekdays import weekday_labels

logger = logging.getLogger(__name__)

# per-chat calendar settings stored in user_data
VIEW_KEY = 'calendar_view'


def user_weekdays(user: Optional[User]) -> tuple:
    code = getattr(user, 'language_code', None) or config.CALENDAR_CULTURE
    return weekday_labels(code)


def user_view(context: ContextTypes.DEFAULT_TYPE) -> CalendarView:
    return coerce_view(context.user_data.get(VIEW_KEY, config.CALENDAR_VIEW))


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Hi! I show a month calendar you can page through.\nCommands:\n/calendar - show this month\n/calendar weekly - show it with weekday headers"
    )


async def calendar_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if context.args:
        try:
            context.user_data[VIEW_KEY] = coerce_view(context.args[0].lower()).value
        except CalendarError:
            await update.message.reply_text('Unknown view. Use /calendar default or /calendar weekly.')
            return
    today = date.today()
    await send_calendar(
        context.bot, update.effective_chat.id, 'Pick a date:',
        today.year, today.month, user_view(context), user_weekdays(update.effective_user),
    )


async def calendar_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    try:
        intent = decode(query.data)
    except CalendarError:
        logger.exception('calendar_callback')
        await query.edit_message_text('Calendar error. Send /calendar to start again.')
        return

    if intent.action is Action.DAY:
        # datetime.date only covers years 1..9999; navigation has no bound
        await query.edit_message_text(f'You picked {intent.year}-{intent.month:02d}-{intent.day:02d}.')
        return

    target = apply_intent(intent)
    markup = calendar_markup(target.year, target.month, user_view(context), user_weekdays(query.from_user))
    try:
        await query.edit_message_reply_markup(reply_markup=markup)
    except TelegramError:
        logger.exception('Failed to update calendar to %s-%s', target.year, target.month)


async def ignore_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.callback_query.answer()


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error('Update %s caused error', update, exc_info=context.error)


def build_application(token: str):
    application = ApplicationBuilder().token(token).build()
    application.add_handler(CommandHandler('start', start))
    application.add_handler(CommandHandler('calendar', calendar_cmd))
    application.add_handler(CallbackQueryHandler(calendar_callback, pattern='^calendar:'))
    application.add_handler(CallbackQueryHandler(ignore_callback, pattern='^ignore$'))
    application.add_error_handler(error_handler)
    return application


def main():
    logging.basicConfig(level=config.LOG_LEVEL)
    if not config.BOT_TOKEN:
        raise SystemExit('BOT_TOKEN is not set')
    application = build_application(config.BOT_TOKEN)
    logger.info('Starting bot...')
    application.run_polling()


if __name__ == '__main__':
    main()
