"""Environment-driven settings for the pitchside service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Invalid bool for %s: %s; using default %s", name, raw, default)
    return default


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s=%d below minimum %d; using default %d", name, value, min_value, default)
        return default
    if max_value is not None and value > max_value:
        logger.warning("%s=%d above maximum %d; using default %d", name, value, max_value, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    seed_default_team: bool = True
    default_team_name: str = "FC Champions"
    default_team_coach: str | None = "Marco Rossi"
    host: str = "127.0.0.1"
    port: int = 8080


def load_settings() -> Settings:
    """Read settings from ``PITCHSIDE_*`` environment variables."""

    defaults = Settings()
    coach = os.getenv("PITCHSIDE_DEFAULT_TEAM_COACH", defaults.default_team_coach or "")
    return Settings(
        seed_default_team=_env_bool("PITCHSIDE_SEED_TEAM", defaults.seed_default_team),
        default_team_name=os.getenv("PITCHSIDE_DEFAULT_TEAM_NAME", defaults.default_team_name),
        default_team_coach=coach or None,
        host=os.getenv("PITCHSIDE_HOST", defaults.host),
        port=_env_int("PITCHSIDE_PORT", defaults.port, min_value=1, max_value=65535),
    )
