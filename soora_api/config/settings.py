# soora_api/config/settings.py
"""
Runtime configuration for the Soora API.

Values come from environment variables (a local ``.env`` file is loaded
first) with defaults that are good enough for local development:

    from soora_api.config.settings import get_settings

    settings = get_settings()
    engine = create_engine(settings.database_url)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass
class Settings:
    database_url: str = "sqlite:///./soora.db"
    db_echo: bool = False

    frontend_url: str = "http://localhost:3000"

    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expires_min: int = 60

    region: str = "Singapore"
    port: int = 3001
    debug: bool = False
    log_level: str = "INFO"

    delivery_fee: float = 5.0
    free_delivery_threshold: float = 50.0

    @property
    def cors_origins(self) -> List[str]:
        raw = self.frontend_url.strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", "").strip() or cls.database_url,
            db_echo=_env_bool("DB_ECHO"),
            frontend_url=os.getenv("FRONTEND_URL", cls.frontend_url),
            jwt_secret=os.getenv("JWT_SECRET", "").strip() or cls.jwt_secret,
            jwt_expires_min=_env_int("JWT_EXPIRES_MIN", cls.jwt_expires_min),
            region=os.getenv("API_REGION", cls.region),
            port=_env_int("PORT", cls.port),
            debug=_env_bool("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).strip().upper() or cls.log_level,
            delivery_fee=_env_float("DELIVERY_FEE", cls.delivery_fee),
            free_delivery_threshold=_env_float(
                "FREE_DELIVERY_THRESHOLD", cls.free_delivery_threshold
            ),
        )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def set_settings(settings: Settings) -> None:
    """Replace the process-wide settings (tests use this instead of env vars)."""
    global _SETTINGS
    _SETTINGS = settings


__all__ = ["Settings", "get_settings", "set_settings"]
