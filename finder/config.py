"""
Configuration management for Recipe Finder.

This module centralizes environment variable loading from .env file at project root.
It should be imported early by the Streamlit entry point (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will not exist, but load_dotenv() is safe to call and will no-op.
Environment variables from the deployment platform will be used instead.

Environment Variables:
- EDAMAM_APP_ID: Required for live searches (Edamam application id)
- EDAMAM_APP_KEY: Required for live searches (Edamam application key)
- EDAMAM_BASE_URL: Optional, defaults to "https://api.edamam.com/api/recipes/v2"
- EDAMAM_ACCOUNT_USER: Optional, sent as the Edamam-Account-User header
- EDAMAM_TIMEOUT_SECONDS: Optional, defaults to 15
- RECIPE_DEFAULT_QUERY: Optional, query searched on first load (defaults to "chicken")
- LOG_LEVEL: Optional, defaults to "INFO"
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.edamam.com/api/recipes/v2"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_QUERY = "chicken"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Locates the project root by going up from this file's location
    (finder/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Where .env doesn't exist this is a no-op
    and platform environment variables will be used.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"

    # override=False means existing env vars take precedence
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the app.

    Args:
        level: Level name (e.g. "DEBUG"). Falls back to LOG_LEVEL, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class EdamamConfig:
    """Configuration for the Edamam recipe connector."""

    @staticmethod
    def get_app_id() -> Optional[str]:
        """
        Get Edamam application id from environment.

        Returns:
            App id string or None if not set

        Note:
            This does not raise an error - let the connector handle validation.
        """
        return os.getenv("EDAMAM_APP_ID")

    @staticmethod
    def get_app_key() -> Optional[str]:
        """
        Get Edamam application key from environment.

        Returns:
            App key string or None if not set
        """
        return os.getenv("EDAMAM_APP_KEY")

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe search endpoint.

        Returns:
            Endpoint URL with trailing slash removed
        """
        return os.getenv("EDAMAM_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_account_user() -> Optional[str]:
        """Get the optional Edamam-Account-User header value."""
        return os.getenv("EDAMAM_ACCOUNT_USER") or None

    @staticmethod
    def get_timeout_seconds() -> float:
        """
        Get the HTTP timeout for a search request.

        Returns:
            Timeout in seconds (default: 15). Invalid values fall back to the default.
        """
        raw = os.getenv("EDAMAM_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
        return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS


def get_default_query() -> str:
    """Query committed when the page first loads."""
    return os.getenv("RECIPE_DEFAULT_QUERY", DEFAULT_QUERY)


def get_required_env_vars() -> dict:
    """
    Get a dictionary of all required environment variables and their status.

    Returns:
        Dictionary with keys:
        - edamam_app_id: bool (True if set)
        - edamam_app_key: bool (True if set)
    """
    return {
        "edamam_app_id": EdamamConfig.get_app_id() is not None,
        "edamam_app_key": EdamamConfig.get_app_key() is not None,
    }


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Raises:
        RuntimeError: If any required configuration is missing

    Note:
        This is a convenience function. The connector also validates its
        own required configuration and raises RuntimeError if missing.
    """
    missing = []

    if not EdamamConfig.get_app_id():
        missing.append("EDAMAM_APP_ID")

    if not EdamamConfig.get_app_key():
        missing.append("EDAMAM_APP_KEY")

    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n" +
            "\n".join(f"  - {var}" for var in missing) +
            "\n\nPlease create a .env file at the project root with these variables."
        )
