# src/worddies/core/config.py
"""
Process configuration from the environment (and an optional .env file).
"""

import logging
import os
import re
from dataclasses import dataclass
from datetime import time, timezone
from pathlib import Path

from dotenv import load_dotenv

from worddies.core.errors import ConfigError


DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


@dataclass(frozen=True)
class Settings:
    redis_url: str
    corpus_path: Path
    discord_token: str | None = None
    max_attempts: int | None = None
    daily_time: time = time(9, 0, tzinfo=timezone.utc)
    dictionary_url: str = DICTIONARY_URL
    http_timeout: float = 10.0
    log_level: str = "INFO"

    def require_token(self) -> str:
        if not self.discord_token:
            raise ConfigError("DISCORD_TOKEN is not set")
        return self.discord_token


def _int(env: dict, name: str, default: int | None) -> int | None:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _daily_time(raw: str) -> time:
    m = _TIME_RE.match(raw.strip())
    if not m:
        raise ConfigError(f"WORDDIES_DAILY_TIME must look like HH:MM, got {raw!r}")
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise ConfigError(f"WORDDIES_DAILY_TIME out of range: {raw!r}")
    return time(hour, minute, tzinfo=timezone.utc)


def load_settings(env: dict | None = None, dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    REDIS_URL is always required. DISCORD_TOKEN is only checked by
    Settings.require_token(), so the API server can run without it.
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = dict(os.environ)

    redis_url = (env.get("REDIS_URL") or "").strip()
    if not redis_url:
        raise ConfigError("REDIS_URL is not set")

    corpus = env.get("WORDDIES_CORPUS") or "words_alpha.txt"

    max_attempts = _int(env, "WORDDIES_MAX_ATTEMPTS", None)
    if max_attempts is not None and max_attempts < 0:
        raise ConfigError("WORDDIES_MAX_ATTEMPTS must not be negative")

    try:
        http_timeout = float(env.get("HTTP_TIMEOUT") or 10.0)
    except ValueError:
        raise ConfigError(f"HTTP_TIMEOUT must be a number, got {env.get('HTTP_TIMEOUT')!r}")

    return Settings(
        redis_url=redis_url,
        corpus_path=Path(corpus).expanduser().resolve(),
        discord_token=(env.get("DISCORD_TOKEN") or "").strip() or None,
        max_attempts=max_attempts or None,  # 0 means unbounded
        daily_time=_daily_time(env.get("WORDDIES_DAILY_TIME") or "09:00"),
        dictionary_url=(env.get("DICTIONARY_URL") or DICTIONARY_URL).rstrip("/"),
        http_timeout=http_timeout,
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    # discord.py and httpx are chatty at INFO
    logging.getLogger("discord.gateway").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
