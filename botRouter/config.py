from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from botRouter.errors import ConfigError

DEFAULT_SERVER_URL = "https://api.telegram.org"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class BotConfig:
    """
    Everything one bot instance needs to talk to the platform.
    Shared by reference with the transport and the command matchers,
    so a username learned from getMe is seen by handlers registered earlier.
    """
    token: str = field(repr=False)
    serverUrl: str = DEFAULT_SERVER_URL
    testEnvironment: bool = False
    username: str = ""
    requestTimeout: float = 30.0
    pollTimeout: int = 50
    pollLimit: int = 100
    workers: int = 4
    debug: bool = False


def _envBool(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in _TRUTHY


def _envNumber(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def loadConfig() -> BotConfig:
    load_dotenv()

    token = (os.getenv("TELEGRAM_BOT_TOKEN") or "").strip()
    if not token:
        raise ConfigError("TELEGRAM_BOT_TOKEN is not set")

    return BotConfig(
        token=token,
        serverUrl=(os.getenv("TELEGRAM_SERVER_URL") or DEFAULT_SERVER_URL).rstrip("/"),
        testEnvironment=_envBool("TELEGRAM_TEST_ENVIRONMENT"),
        username=(os.getenv("TELEGRAM_BOT_USERNAME") or "").strip().lstrip("@"),
        requestTimeout=_envNumber("TELEGRAM_REQUEST_TIMEOUT", 30.0, float),
        pollTimeout=_envNumber("TELEGRAM_POLL_TIMEOUT", 50, int),
        pollLimit=_envNumber("TELEGRAM_POLL_LIMIT", 100, int),
        workers=_envNumber("TELEGRAM_WORKERS", 4, int),
        debug=_envBool("TELEGRAM_DEBUG"),
    )
