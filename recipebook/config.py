"""
Application Configuration

Reads settings from the environment (and a local .env file) once at import.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .matcher import EXACT, MATCH_MODES, clean_mode

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class Settings:
    """Environment-backed settings for the recipe service."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./recipes.db")
        self.host = os.getenv("HOST", "127.0.0.1")
        self.port = int(os.getenv("PORT", "8004"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        origins = os.getenv("CORS_ORIGINS", "*")
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        self.match_mode = self._read_match_mode()

    @staticmethod
    def _read_match_mode() -> str:
        mode = clean_mode(os.getenv("RECIPEBOOK_MATCH_MODE", EXACT))
        if mode not in MATCH_MODES:
            logger.warning(
                "Ignoring unknown RECIPEBOOK_MATCH_MODE %r, using %r", mode, EXACT
            )
            return EXACT
        return mode


settings = Settings()


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=level or settings.log_level,
        format=LOG_FORMAT,
    )
