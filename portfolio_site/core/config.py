"""Configuration settings for the portfolio site.

This module manages environment variables and application settings.
"""
import json
import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def parse_backend_config(raw: str) -> Dict[str, Any]:
    """Parse the backend connection config supplied by the hosting environment.

    Args:
        raw: JSON object string, e.g. '{"url": "...", "key": "..."}'

    Returns:
        The parsed config, or an empty dict if the value is not a JSON object
    """
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        logger.error(f"BACKEND_CONFIG is not valid JSON: {str(e)}")
        return {}
    if not isinstance(parsed, dict):
        logger.error("BACKEND_CONFIG must be a JSON object")
        return {}
    return parsed


class Settings:
    """Application settings.

    Attributes:
        API_V1_STR: API version path prefix
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        APP_ID: Tenant identifier partitioning stored contact messages
        BACKEND_CONFIG: Supabase connection config ({"url", "key"}), empty when absent
        INITIAL_AUTH_TOKEN: Optional refresh token exchanged for a session at startup
        CONTACT_MESSAGES_TABLE: Table receiving contact messages
    """
    def __init__(self):
        self.API_V1_STR = "/api/v1"
        self.PROJECT_NAME = "Portfolio Site"
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        self.APP_ID = os.getenv("APP_ID", "default-app-id")

        # Supabase Settings
        self.BACKEND_CONFIG = parse_backend_config(os.getenv("BACKEND_CONFIG", ""))
        if not self.BACKEND_CONFIG:
            supabase_url = os.getenv("SUPABASE_URL")
            supabase_key = os.getenv("SUPABASE_ANON_KEY")
            if supabase_url and supabase_key:
                self.BACKEND_CONFIG = {"url": supabase_url, "key": supabase_key}

        self.INITIAL_AUTH_TOKEN = os.getenv("INITIAL_AUTH_TOKEN") or None
        self.CONTACT_MESSAGES_TABLE = os.getenv(
            "CONTACT_MESSAGES_TABLE", "contact_messages"
        )


settings = Settings()
