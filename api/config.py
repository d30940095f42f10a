"""Runtime configuration, read from the environment (and a local .env file)."""

import logging
import os
import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "change_me"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_duration(value: str) -> timedelta:
    """Parse "3600", "30m", "12h", "7d" or "2w" into a timedelta."""
    match = _DURATION_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid duration {value!r}; expected e.g. 3600, 30m, 12h, 7d")
    amount, unit = match.groups()
    duration = timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})
    if duration <= timedelta(0):
        raise ValueError(f"Duration must be positive, got {value!r}")
    return duration


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Provide secrets via environment variables or a .env file; the default
    JWT secret is only fit for local development.
    """

    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "golfdb"
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_expires_in: timedelta = timedelta(days=7)
    host: str = "0.0.0.0"
    port: int = 7000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL {self.log_level!r}; expected one of {sorted(_LOG_LEVELS)}")

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.environ.get("CORS_ORIGINS", "*")
        return cls(
            mongo_uri=os.environ.get("MONGO_URI", cls.mongo_uri),
            db_name=os.environ.get("DB_NAME", cls.db_name),
            jwt_secret=os.environ.get("JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_expires_in=parse_duration(os.environ.get("JWT_EXPIRES_IN", "7d")),
            host=os.environ.get("HOST", cls.host),
            port=_env_int("PORT", cls.port),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).strip().upper(),
        )

    def warn_if_insecure(self) -> None:
        if self.jwt_secret == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is not set; using the insecure development default")
