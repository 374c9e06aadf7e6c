from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _getenv_int(name: str, default: int) -> int:
    v = os.getenv(name, str(default)).strip()
    try:
        return int(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be an integer; got {v!r}") from err


def _getenv_float(name: str, default: float) -> float:
    v = os.getenv(name, str(default)).strip()
    try:
        return float(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be a number; got {v!r}") from err


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


# Load .env from project root if present
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env", override=False)

# ---- Bot identity (used to enforce USER_AGENT naming) ----
BOT_NAME = "SiteIdentifyBot"
BOT_VERSION = "0.1"
CONTACT_URL = "https://github.com/siteid/siteid"


def _getenv_user_agent(env_var: str, default: str) -> str:
    """
    Read a user-agent from the environment, but ensure our bot name is present
    so site operators can always tell who is asking.
    """
    ua = os.getenv(env_var, default).strip()
    if BOT_NAME not in ua:
        ua = f"{BOT_NAME} {ua}"
    return ua


DEFAULT_USER_AGENT = f"{BOT_NAME}/{BOT_VERSION} (+{CONTACT_URL})"


@dataclass(frozen=True)
class FetchConfig:
    user_agent: str
    connect_timeout_s: float
    read_timeout_s: float
    max_redirects: int
    max_body_bytes: int
    accept: str


@dataclass(frozen=True)
class AppConfig:
    fetch: FetchConfig
    log_level: str


def load_settings() -> AppConfig:
    """
    Build the structured config from the environment.

    Read at call time (not import time) so tests can monkeypatch env vars and
    get a fresh view without reloading the module.
    """
    fetch = FetchConfig(
        user_agent=_getenv_user_agent("FETCH_USER_AGENT", DEFAULT_USER_AGENT),
        connect_timeout_s=_getenv_float("FETCH_CONNECT_TIMEOUT_S", 5.0),
        read_timeout_s=_getenv_float("FETCH_READ_TIMEOUT_S", 10.0),
        max_redirects=_getenv_int("FETCH_MAX_REDIRECTS", 5),
        # Metadata lives in <head>; 2MB is far more than we ever need
        max_body_bytes=_getenv_int("FETCH_MAX_BODY_BYTES", 2_000_000),
        accept=_getenv_str("FETCH_ACCEPT", "text/html, */*"),
    )
    return AppConfig(
        fetch=fetch,
        log_level=_getenv_str("SITEID_LOG_LEVEL", "WARNING").upper(),
    )


__all__ = [
    "BOT_NAME",
    "DEFAULT_USER_AGENT",
    "FetchConfig",
    "AppConfig",
    "load_settings",
]
