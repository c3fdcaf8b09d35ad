# ecommerce_http_api/config.py

"""
Configuration for the e-commerce HTTP API.

Settings are read from environment variables prefixed with ``SHOP_`` (and
from an optional ``.env`` file in the working directory), on top of the
defaults declared below.

Environment variables
=====================

- SHOP_DATABASE_URL
    SQLAlchemy URL of the relational store.
    Default: "sqlite:///./ecommerce.db"

- SHOP_API_PREFIX
    Path prefix under which the user/product/order routers are mounted.
    Default: "/api"

- SHOP_CORS_ORIGINS
    Comma-separated list of allowed CORS origins. "*" allows all origins.
    Default: "*"

- SHOP_LOG_LEVEL / SHOP_LOG_FORMAT
    Logging level name and renderer ("json" or "console").

- SHOP_SEED_DATA
    If true, demo users and products are inserted at startup when the
    tables are empty.

Typical usage
=============

    from ecommerce_http_api.config import get_config

    cfg = get_config()
    engine = build_engine(cfg.database_url, echo=cfg.database_echo)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration for the HTTP API, validated by Pydantic.
    """

    # --- Application meta ---
    app_name: str = "ecommerce-http-api"
    app_env: AppEnv = AppEnv.DEVELOPMENT
    version: str = "1.0.0"
    debug: bool = False

    # --- HTTP server ---
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False
    api_prefix: str = "/api"
    docs_enabled: bool = True
    cors_origins: str = "*"

    # --- Persistence ---
    database_url: str = "sqlite:///./ecommerce.db"
    database_echo: bool = False
    seed_data: bool = True

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "console"

    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        # "" or "/" means no prefix; otherwise "/x" without trailing slash
        value = (value or "").strip()
        if value in ("", "/"):
            return ""
        if not value.startswith("/"):
            value = "/" + value
        return value.rstrip("/")

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if value <= 0 or value > 65535:
            raise ValueError(f"port must be in 1..65535, got {value}")
        return value

    @property
    def cors_origin_list(self) -> List[str]:
        """
        Parse ``cors_origins`` into the list expected by CORSMiddleware.
        """
        raw = (self.cors_origins or "").strip()
        if not raw or raw == "*":
            return ["*"]
        parts = [p.strip() for p in raw.split(",")]
        return [p for p in parts if p]


# Singleton configuration instance
_CONFIG: Optional[Settings] = None


def get_config() -> Settings:
    """
    Return the global Settings instance, creating it from the environment
    on first use.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = Settings()
    return _CONFIG


def set_config(config: Settings) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where configuration is overridden without
    touching environment variables.
    """
    global _CONFIG
    _CONFIG = config


__all__ = ["AppEnv", "Settings", "get_config", "set_config"]
