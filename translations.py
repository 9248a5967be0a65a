TRANSLATIONS = {
    "en": {
        # Main Menu
        "welcome": "Welcome to FireflyBuddy!",
        "welcome_message": "Hi {name}! I show you monthly and yearly summaries from your Firefly III books.",
        "choose_option": "Tap a button below to get started 👇",
        "select_language": "🌐 Select Language / भाषा चुनें",
        "language_changed": "✅ Language changed to English",

        # Labels
        "labels.REPORTS": "📊 Reports",
        "labels.DONE": "✅ Done",

        # Reports
        "reports.monthly": (
            "📅 <b>Report for {period}</b>\n\n"
            "<b>💸 Expenses</b>\n<pre>{expenses}</pre>\n"
            "<b>💰 Income</b>\n<pre>{income}</pre>\n"
            "{expenseTotal}\n{incomeTotal}\n{cashflow}"
        ),
        "reports.yearly": (
            "🗓 <b>Yearly report for {period}</b>\n\n"
            "<b>💸 Expenses</b>\n<pre>{expenses}</pre>\n"
            "<b>💰 Income</b>\n<pre>{income}</pre>\n"
            "{expenseTotal}\n{incomeTotal}\n{cashflow}"
        ),
        "reports.totalExpense": "Total spent: <b>{total}</b>",
        "reports.totalIncome": "Total earned: <b>{total}</b>",
        "reports.cashflow": "Cashflow: <b>{amount}</b>",
        "reports.noData": "No data for this period",
        "reports.showMonthly": "📅 Monthly view",
        "reports.showYearly": "🗓 Yearly view",

        # Errors
        "error_occurred": "⚠️ Sorry, something went wrong. Please try again or use /start to restart.",
        "errors.firefly": "⚠️ Firefly III request failed: {error}",
        "errors.firefly_auth": "🔒 Firefly III rejected the access token. Please check FIREFLY_TOKEN.",
        "errors.bad_period": "⚠️ Could not understand the requested period.",
    },

    "hi": {
        # Main Menu
        "welcome": "FireflyBuddy में आपका स्वागत है!",
        "welcome_message": "नमस्ते {name}! मैं आपकी Firefly III किताबों से मासिक और वार्षिक सारांश दिखाता हूं।",
        "choose_option": "शुरू करने के लिए नीचे एक बटन दबाएं 👇",
        "select_language": "🌐 Select Language / भाषा चुनें",
        "language_changed": "✅ भाषा हिंदी में बदल गई",

        # Labels
        "labels.REPORTS": "📊 रिपोर्ट",
        "labels.DONE": "✅ हो गया",

        # Reports
        "reports.monthly": (
            "📅 <b>{period} की रिपोर्ट</b>\n\n"
            "<b>💸 खर्च</b>\n<pre>{expenses}</pre>\n"
            "<b>💰 आय</b>\n<pre>{income}</pre>\n"
            "{expenseTotal}\n{incomeTotal}\n{cashflow}"
        ),
        "reports.yearly": (
            "🗓 <b>{period} की वार्षिक रिपोर्ट</b>\n\n"
            "<b>💸 खर्च</b>\n<pre>{expenses}</pre>\n"
            "<b>💰 आय</b>\n<pre>{income}</pre>\n"
            "{expenseTotal}\n{incomeTotal}\n{cashflow}"
        ),
        "reports.totalExpense": "कुल खर्च: <b>{total}</b>",
        "reports.totalIncome": "कुल आय: <b>{total}</b>",
        "reports.cashflow": "नकदी प्रवाह: <b>{amount}</b>",
        "reports.noData": "इस अवधि के लिए कोई डेटा नहीं",
        "reports.showMonthly": "📅 मासिक दृश्य",
        "reports.showYearly": "🗓 वार्षिक दृश्य",

        # Errors
        "error_occurred": "⚠️ क्षमा करें, कुछ गलत हो गया। कृपया पुनः प्रयास करें या पुनः आरंभ करने के लिए /start का उपयोग करें।",
        "errors.firefly": "⚠️ Firefly III अनुरोध विफल रहा: {error}",
        "errors.firefly_auth": "🔒 Firefly III ने एक्सेस टोकन अस्वीकार कर दिया। कृपया FIREFLY_TOKEN जांचें।",
        "errors.bad_period": "⚠️ अनुरोधित अवधि समझ में नहीं आई।",
    }
}

def get_text(key: str, lang: str = "en", **kwargs) -> str:
    """
    Get translated text for a given key and language.

    Args:
        key: Translation key
        lang: Language code ('en' or 'hi')
        **kwargs: Format parameters for the text

    Returns:
        Translated text
    """
    if lang not in TRANSLATIONS:
        lang = "en"

    text = TRANSLATIONS[lang].get(key, TRANSLATIONS["en"].get(key, key))

    # Format the text with provided parameters
    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError:
            pass

    return text

def report_labels() -> list:
    """Reports menu label in every supported language."""
    return [TRANSLATIONS[lang]["labels.REPORTS"] for lang in TRANSLATIONS]

def get_language_keyboard():
    """Get language selection keyboard."""
    from telegram import InlineKeyboardButton, InlineKeyboardMarkup

    keyboard = [
        [InlineKeyboardButton("🇬🇧 English", callback_data='lang_en')],
        [InlineKeyboardButton("🇮🇳 हिंदी (Hindi)", callback_data='lang_hi')]
    ]
    return InlineKeyboardMarkup(keyboard)
