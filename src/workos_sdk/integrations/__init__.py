"""Framework integrations for the WorkOS Python SDK.

Import the framework module you use, e.g. ``workos_sdk.integrations.fastapi``.
"""

from ._cookies import (
    APP_SESSION_COOKIE,
    WORKOS_SESSION_COOKIE,
    CookieSettings,
    dump_session,
    load_session,
)

__all__ = [
    "APP_SESSION_COOKIE",
    "WORKOS_SESSION_COOKIE",
    "CookieSettings",
    "dump_session",
    "load_session",
]
