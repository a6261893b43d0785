# workshop_sdk/settings.py
import os
from typing import NamedTuple

import dotenv

DEFAULT_API_BASE = "http://localhost:8080/api"
DEFAULT_AUTH_DB_URL = "sqlite+aiosqlite:///./workshop_auth.db"


class Settings(NamedTuple):
    api_base: str
    auth_db_url: str


def load_settings() -> Settings:
    """
    Reads configuration from the environment (and a .env file, if present).

    Example .env:
    WORKSHOP_HOST=https://workshop.example.com
    WORKSHOP_AUTH_DB_URL=sqlite+aiosqlite:///./auth.db

    WORKSHOP_HOST is the server root; the API lives under /api on it.
    """
    dotenv.load_dotenv()

    host = os.environ.get("WORKSHOP_HOST")
    api_base = f"{host.rstrip('/')}/api" if host else DEFAULT_API_BASE

    return Settings(
        api_base=api_base,
        auth_db_url=os.environ.get("WORKSHOP_AUTH_DB_URL", DEFAULT_AUTH_DB_URL),
    )
