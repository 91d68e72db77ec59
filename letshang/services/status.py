from __future__ import annotations

from datetime import datetime, timezone

from letshang.schemas.status import EchoData, EchoOut, HealthOut, RootOut

HEALTH_MESSAGE = "🚀 Let's hang API is running!"
WELCOME_MESSAGE = "Welcome to Let's hang API! 🎉"
ECHO_MESSAGE = "API is working perfectly!"


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_health(version: str) -> HealthOut:
    return HealthOut(
        status="OK",
        timestamp=utc_timestamp(),
        message=HEALTH_MESSAGE,
        version=version,
    )


def build_root(version: str) -> RootOut:
    return RootOut(
        message=WELCOME_MESSAGE,
        version=version,
        endpoints={"health": "/health", "test": "/api/test"},
    )


def build_echo() -> EchoOut:
    return EchoOut(
        message=ECHO_MESSAGE,
        timestamp=utc_timestamp(),
        data=EchoData(users=0, activities=0, status="ready for deployment"),
    )
