"""Shared error reporting for bot handlers."""

import logging

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

import config
from firefly import FireflyError
from translations import get_text

logger = logging.getLogger(__name__)


def get_user_lang(context: ContextTypes.DEFAULT_TYPE, update: Update = None) -> str:
    """Get user's preferred language from the session, then from Telegram."""
    lang = context.user_data.get("language") if context.user_data is not None else None
    if lang:
        return lang
    user = update.effective_user if update else None
    if user and user.language_code:
        return user.language_code.split("-")[0]
    return config.DEFAULT_LANGUAGE


def error_message(err: Exception, lang: str) -> str:
    if isinstance(err, FireflyError):
        if err.status_code in (401, 403):
            return get_text("errors.firefly_auth", lang)
        return get_text("errors.firefly", lang, error=str(err))
    if isinstance(err, ValueError):
        return get_text("errors.bad_period", lang)
    return get_text("error_occurred", lang)


async def handle_callback_query_error(err: Exception, update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Log a handler failure and tell the user what went wrong."""
    logger.error("Update %s caused error: %s", update.update_id if update else None, err, exc_info=err)

    if not update or not update.effective_message:
        return

    lang = get_user_lang(context, update)
    query = update.callback_query
    if query:
        try:
            await query.answer()
        except TelegramError:
            # Already answered before the failure
            logger.debug("Callback query %s already answered", query.id)

    await update.effective_message.reply_text(error_message(err, lang))


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Handle errors."""
    logger.error(f"Update {update} caused error {context.error}")

    if isinstance(update, Update) and update.effective_message:
        lang = get_user_lang(context, update)
        await update.effective_message.reply_text(error_message(context.error, lang))
