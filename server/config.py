# server/config.py

import os
import logging
import secrets
from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """
    Runtime settings for the chore tracker server.
    Values come from the environment (and a local .env file).
    """
    host: str = "127.0.0.1"
    port: int = 3000

    session_secret: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    session_expire_minutes: int = 60
    session_cookie_name: str = "chores_session"

    bcrypt_rounds: int = 10

    store_backend: str = "memory"
    database_url: str = "sqlite:///./data/chores.db"

    cors_origins: list[str] = []
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            "host": os.getenv("HOST"),
            "port": os.getenv("PORT"),
            "session_secret": os.getenv("SESSION_SECRET"),
            "session_expire_minutes": os.getenv("SESSION_EXPIRE_MINUTES"),
            "session_cookie_name": os.getenv("SESSION_COOKIE_NAME"),
            "bcrypt_rounds": os.getenv("BCRYPT_ROUNDS"),
            "store_backend": os.getenv("STORE_BACKEND"),
            "database_url": os.getenv("DATABASE_URL"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        origins = os.getenv("CORS_ORIGINS", "")
        values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        if not values["session_secret"]:
            logger.warning("SESSION_SECRET is not set; using a random secret for this process")

        return cls(**{k: v for k, v in values.items() if v not in (None, "")})
