"""Health-check payloads used by the API."""

from networth.core.projection import MAX_YEARS


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_health_status() -> dict:
    return {"status": "ok", "horizonYears": MAX_YEARS}
