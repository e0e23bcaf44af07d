"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. The records endpoint is configuration,
never computed.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_API_URL = "http://localhost:8080/records"
DEFAULT_RETRY_HINT = "Backend may be waking up. Please wait 10-20 sec and try again."


@dataclass
class Settings:
    # Remote records collection resource
    api_url: str = os.getenv("MEDREC_API_URL", DEFAULT_API_URL)

    # Shown after every remote failure; nothing is retried automatically
    retry_hint: str = os.getenv("MEDREC_RETRY_HINT", DEFAULT_RETRY_HINT)

    # GUI
    window_title: str = os.getenv("MEDREC_WINDOW_TITLE", "Medical Record Management")

    # Logging
    log_level: str = os.getenv("MEDREC_LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
