from datetime import datetime, timezone

UNKNOWN_ERROR = "Unknown error"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp used by the data-inspection endpoints."""
    return datetime.now(timezone.utc).isoformat()


def error_message(exc: BaseException | None, fallback: str = UNKNOWN_ERROR) -> str:
    """Human-readable message carried by an exception, or the fallback."""
    if exc is None:
        return fallback
    message = str(exc).strip()
    return message or fallback


def ok(data=None, message: str | None = None, timestamp: str | None = None):
    """Standard success envelope."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    body["data"] = data if data is not None else {}
    if timestamp is not None:
        body["timestamp"] = timestamp
    return body


def error(error: str = UNKNOWN_ERROR, message: str | None = None, timestamp: str | None = None):
    """Standard error envelope."""
    body = {"success": False}
    if message is not None:
        body["message"] = message
    body["error"] = error or UNKNOWN_ERROR
    if timestamp is not None:
        body["timestamp"] = timestamp
    return body
