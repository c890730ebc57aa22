"""
Blog Posts API configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


def _normalize_prefix(prefix: str) -> str:
    prefix = prefix.strip().strip("/")
    return f"/{prefix}" if prefix else ""


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Blog Posts API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    API_PREFIX: str

    # Storage: one JSON array of posts
    BLOG_DATA_FILE: Path

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.API_PREFIX = _normalize_prefix(os.environ.get("API_PREFIX", "/api"))
        self.BLOG_DATA_FILE = Path(os.environ.get("BLOG_DATA_FILE") or "data/blog.json")
        self.HOST = (os.environ.get("HOST") or "0.0.0.0").strip()
        try:
            self.PORT = int(os.environ.get("PORT") or 3000)
        except ValueError:
            self.PORT = 3000
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
