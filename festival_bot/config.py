# festival_bot/config.py
# Bot settings, read from the environment (.env supported)
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class DefaultConfig:
    """Bot configuration. Empty AppId and Password are fine for local testing."""

    APP_ID = os.getenv("MicrosoftAppId", "")
    APP_PASSWORD = os.getenv("MicrosoftAppPassword", "")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3978"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
