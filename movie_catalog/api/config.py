"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[1]


def get_movies_path() -> str:
    """Get movies JSON file path from env or the bundled data file."""
    return os.getenv("MOVIES_DATA_PATH", "") or str(PACKAGE_DIR / "data" / "movies.json")


def get_reviews_path() -> str:
    """Get reviews JSON file path from env or the bundled data file."""
    return os.getenv("REVIEWS_DATA_PATH", "") or str(PACKAGE_DIR / "data" / "reviews.json")


def get_templates_dir() -> str:
    """Get Jinja2 templates directory from env or the bundled templates."""
    return os.getenv("TEMPLATES_DIR", "") or str(PACKAGE_DIR / "templates")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get log directory from env or default."""
    return os.getenv("LOG_DIR", "logs")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8080"))
