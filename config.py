import os
from dotenv import load_dotenv

load_dotenv()

TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")

FIREFLY_URL = os.getenv("FIREFLY_URL")
FIREFLY_TOKEN = os.getenv("FIREFLY_TOKEN")

# Bot Settings
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

def validate_config():
    """Validate that all required configuration is present."""
    missing = []

    if not TELEGRAM_TOKEN:
        missing.append("TELEGRAM_TOKEN")
    if not FIREFLY_URL:
        missing.append("FIREFLY_URL")
    if not FIREFLY_TOKEN:
        missing.append("FIREFLY_TOKEN")

    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}\n"
            "Please copy .env.example to .env and fill in your credentials."
        )

    return True
