"""HTTP calls the account form makes against the service."""
from dataclasses import dataclass
from typing import Any

import httpx

FALLBACK_MESSAGE = "An unexpected error occurred. Please try again!"


@dataclass
class ApiResult:
    ok: bool
    message: str
    data: dict[str, Any] | None = None


def _to_result(response: httpx.Response) -> ApiResult:
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}

    message = body.get("message")
    if response.status_code in (200, 201):
        return ApiResult(ok=True, message=message or "", data=body.get("data"))
    if isinstance(message, str) and message:
        return ApiResult(ok=False, message=message)
    return ApiResult(ok=False, message=FALLBACK_MESSAGE)


class AccountApi:
    def __init__(self, client: httpx.Client):
        self.client = client

    def _post(self, path: str, payload: dict) -> ApiResult:
        try:
            response = self.client.post(path, json=payload)
        except httpx.HTTPError:
            return ApiResult(ok=False, message=FALLBACK_MESSAGE)
        return _to_result(response)

    def signup(self, username: str, email: str, password: str) -> ApiResult:
        return self._post("/signup", {"username": username, "email": email, "password": password})

    def login(self, email: str, password: str) -> ApiResult:
        return self._post("/login", {"email": email, "password": password})
