"""Cookie settings and helpers shared by the framework integrations."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .._sealing import Password, seal_data, unseal_data

logger = logging.getLogger(__name__)

SEVEN_DAYS = 60 * 60 * 24 * 7


class CookieSettings(BaseModel):
    """Attributes of a session cookie."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = "/"
    max_age: int = SEVEN_DAYS
    secure: bool = True
    httponly: bool = True
    samesite: Literal["lax", "strict", "none"] = "lax"


APP_SESSION_COOKIE = CookieSettings(name="session")
WORKOS_SESSION_COOKIE = CookieSettings(name="wos-session")


def load_session(value: str | None, password: Password) -> dict[str, Any]:
    """Unseal a session cookie, treating a missing or broken one as empty."""
    if not value:
        return {}
    try:
        data = unseal_data(value, password)
    except ValueError as e:
        logger.debug("Ignoring unreadable session cookie: %s", e)
        return {}
    return data if isinstance(data, dict) else {}


def dump_session(data: dict[str, Any], password: Password) -> str:
    """Seal a session dict into a cookie value."""
    return seal_data(data, password)
