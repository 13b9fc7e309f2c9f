# settings.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Configurações da aplicação (env vars)."""

    def __init__(self):
        # — Logging
        self.LOG_LEVEL       = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FORCE_JSON  = os.getenv("LOG_FORCE_JSON", "false").strip().lower() in _TRUTHY

    def log_level_value(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
