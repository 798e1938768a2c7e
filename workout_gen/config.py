from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Exercise library JSON; the bundled library is used when unset
    LIBRARY_PATH: Optional[str] = None
    TEMPLATES_PATH: str = os.path.join(".workout_gen", "quota_templates.json")

    # Engine policies
    REROLL_HISTORY_SIZE: int = 3
    TEMPLATE_NAME_MAX_LENGTH: int = 50

    # Presentation defaults for library entries that carry none
    DEFAULT_SETS: int = 3
    DEFAULT_REPS: str = "10"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Allow Streamlit Cloud secrets to override or provide env values
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in ["APP_ENV", "LOG_LEVEL", "LIBRARY_PATH", "TEMPLATES_PATH"]:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception as e:
        # secrets.toml is optional outside Streamlit Cloud
        logger.debug("Streamlit secrets unavailable: %s", e)
    return Settings(**overrides)  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
