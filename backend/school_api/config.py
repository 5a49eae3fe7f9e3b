"""Application settings read from the environment."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    SQL_ECHO: bool
    ALLOW_DEV_CORS: bool
    LOG_LEVEL: str
    DEFAULT_PAGE_LIMIT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'school.db'}")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
        self._validate()

    def _validate(self):
        if self.DEFAULT_PAGE_LIMIT < 1:
            raise RuntimeError("DEFAULT_PAGE_LIMIT must be a positive integer")


settings = Settings()
