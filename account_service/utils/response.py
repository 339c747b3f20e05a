from typing import Any


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"success": True, "message": message, "data": data}


def error_response(message: str) -> dict:
    return {"success": False, "message": message}
