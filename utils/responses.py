"""Response envelope shared by every route: {success, data} or {success, error}."""
from typing import Any


def success(data: Any = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body


def failure(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}
