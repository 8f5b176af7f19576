"""Application settings and configuration constants.

This module contains the settings, validation limits and user-facing
messages of the itinerary form.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Validation limits ---
MIN_ADULTS = 1
MAX_ADULTS = 20
DEFAULT_ADULTS = 1
MAX_DESCRIPTION_LENGTH = 300

# --- Form messages ---
DESTINATION_REQUIRED = "Destination is required"
ORIGIN_REQUIRED = "Origin is required"
START_DATE_REQUIRED = "Start date is required"
START_DATE_INVALID = "Start date must be a valid date (YYYY-MM-DD)"
END_DATE_REQUIRED = "End date is required"
END_DATE_INVALID = "End date must be a valid date (YYYY-MM-DD)"
MIN_ADULTS_MESSAGE = "At least 1 adult required"
MAX_ADULTS_MESSAGE = f"Maximum {MAX_ADULTS} adults allowed"
DESCRIPTION_TOO_LONG = f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters"
END_BEFORE_START = "End date must be after start date"

# --- Response constants ---
ITINERARY_CREATION_ERROR = "Failed to create itinerary. Please try again."
ITINERARY_PATH = "/itinerary"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Itinerary Form"

    # Remote itinerary service
    ITINERARY_API_URL: str = "http://localhost:8080/api"

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/itinerary_form.log"


settings = Settings()
