from telegram import Update, KeyboardButton, ReplyKeyboardMarkup
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler, MessageHandler, filters, CallbackQueryHandler, ContextTypes
from errors import error_handler, get_user_lang, handle_callback_query_error
from firefly import FireflyClient
from tools.navigation_tool import CLOSE_PATTERN, REPORT_PATTERN, decode_report_action, get_report_keyboard
from tools.period_tool import resolve_period
from tools.report_tool import fetch_report_data, format_report_message
from translations import get_text, get_language_keyboard, report_labels
import config
import logging
import re

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=config.LOG_LEVEL
)
logger = logging.getLogger(__name__)

REPORT_LABELS_PATTERN = re.compile(
    "^(" + "|".join(re.escape(label) for label in report_labels()) + ")$"
)

def get_main_menu_keyboard(lang: str = "en"):
    """Get the reply keyboard shown under the chat input."""
    keyboard = [[KeyboardButton(get_text("labels.REPORTS", lang))]]
    return ReplyKeyboardMarkup(keyboard, resize_keyboard=True)

def get_firefly_client() -> FireflyClient:
    """Build a Firefly III client from the bot configuration."""
    return FireflyClient(
        base_url=config.FIREFLY_URL,
        token=config.FIREFLY_TOKEN,
        timeout=config.REQUEST_TIMEOUT,
    )

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    user = update.effective_user
    lang = get_user_lang(context, update)

    welcome_message = f"""👋 <b>{get_text('welcome', lang)}</b>

{get_text('welcome_message', lang, name=user.first_name)}

{get_text('choose_option', lang)}"""

    message = await update.message.reply_text(
        welcome_message,
        reply_markup=get_main_menu_keyboard(lang),
        parse_mode='HTML'
    )
    # Removed together with the report when the user taps "Done"
    context.user_data["menu_message_id"] = message.message_id

async def language_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /language command."""
    lang = get_user_lang(context, update)
    await update.message.reply_text(
        get_text('select_language', lang),
        reply_markup=get_language_keyboard()
    )

async def language_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle lang_* buttons from the language keyboard."""
    query = update.callback_query
    await query.answer()

    new_lang = query.data.replace('lang_', '')
    context.user_data["language"] = new_lang
    logger.info("User %s switched language to %s", update.effective_user.id, new_lang)

    await query.edit_message_text(get_text('language_changed', new_lang))

async def show_report(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Send a fresh report, or redraw it for a navigation button."""
    is_regular_message = update.message is not None
    logger.debug("show_report: is_regular_message=%s", is_regular_message)

    try:
        lang = get_user_lang(context, update)

        if is_regular_message:
            period = resolve_period()
        else:
            query = update.callback_query
            await query.answer()
            anchor, kind = decode_report_action(query.data)
            period = resolve_period(anchor, kind)

        logger.debug("period: %s %s..%s", period.kind, period.start_date, period.end_date)

        expense_data, income_data = await fetch_report_data(get_firefly_client(), period)

        text = format_report_message(period, expense_data, income_data, lang)
        keyboard = get_report_keyboard(period.anchor, period.kind, lang)

        if is_regular_message:
            await update.message.reply_text(text, reply_markup=keyboard, parse_mode='HTML')
        else:
            await update.callback_query.edit_message_text(text, reply_markup=keyboard, parse_mode='HTML')
    except Exception as err:
        await handle_callback_query_error(err, update, context)

async def close_report(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Delete the report message and the remembered menu message."""
    query = update.callback_query
    await query.answer()

    menu_message_id = context.user_data.pop("menu_message_id", None)
    if menu_message_id:
        try:
            await context.bot.delete_message(chat_id=query.message.chat_id, message_id=menu_message_id)
        except TelegramError as e:
            # Deleted by the user or too old to delete
            logger.debug("Could not delete menu message %s: %s", menu_message_id, e)

    await query.message.delete()

def build_application(token: str) -> Application:
    """Create the bot application and register all handlers."""
    app = Application.builder().token(token).build()

    # Add handlers
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("language", language_command))
    app.add_handler(CommandHandler("report", show_report))
    app.add_handler(MessageHandler(filters.Regex(REPORT_LABELS_PATTERN), show_report))
    app.add_handler(CallbackQueryHandler(show_report, pattern=REPORT_PATTERN))
    app.add_handler(CallbackQueryHandler(close_report, pattern=CLOSE_PATTERN))
    app.add_handler(CallbackQueryHandler(language_handler, pattern=r"^lang_"))

    # Add error handler
    app.add_error_handler(error_handler)

    return app

def main():
    """Start the bot."""
    # Validate configuration
    try:
        config.validate_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return

    app = build_application(config.TELEGRAM_TOKEN)

    logger.info("🤖 FireflyBuddy is starting...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == '__main__':
    main()
