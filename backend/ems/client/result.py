"""ApiResult and ApiError — the return contract of every client call.

Invariants:
    - Client calls never raise for HTTP or transport failures; they return ApiResult
    - ok=True implies error is None; ok=False implies error is set
    - status_code is None only when no HTTP response was received
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


NETWORK_ERROR = "NETWORK_ERROR"
UNEXPECTED_RESPONSE = "UNEXPECTED_RESPONSE"


class ApiError(BaseModel):
    """Structured error payload within an ApiResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    status_code: int | None = None
    fields: dict[str, str] = {}

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class ApiResult(BaseModel):
    """Outcome of one remote operation.

    Attributes:
        ok: Whether the server answered with a 2xx status.
        op: Name of the operation (e.g. ``"create_employee"``).
        status_code: HTTP status, or None on transport failure.
        data: Parsed payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    status_code: int | None = None
    data: Any = None
    error: ApiError | None = None

    @classmethod
    def success(cls, op: str, status_code: int, data: Any) -> ApiResult:
        return cls(ok=True, op=op, status_code=status_code, data=data)

    @classmethod
    def failure(cls, op: str, error: ApiError) -> ApiResult:
        return cls(ok=False, op=op, status_code=error.status_code, error=error)
