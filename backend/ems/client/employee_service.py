"""Employee Service Client — one function per API endpoint over httpx.

Invariants:
    - Each call issues exactly one HTTP request (no retries, no caching, no batching)
    - Each call returns ApiResult; transport and HTTP errors become error variants
    - Successful payloads are parsed with the server's own response schemas

Design Decisions:
    - httpx.Client injected: the terminal frontend owns its lifetime, tests pass a
      client built on httpx.MockTransport
    - Server error envelopes ({"error": {...}}) are unpacked into ApiError, with
      field-level validation messages keyed by snake_case field name
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from ems.client.result import (
    ApiError, ApiResult, NETWORK_ERROR, UNEXPECTED_RESPONSE,
)
from ems.core.domain_types import EmployeeFields
from ems.schemas.employee import EmployeeResponse, MessageResponse

logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/employees"


class EmployeeServiceClient:
    """Thin wrapper exposing list/get/create/update/delete for employees."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        if http is None:
            if base_url is None:
                raise ValueError("base_url is required when no client is given")
            http = httpx.Client(base_url=base_url, timeout=timeout)
        self._http = http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "EmployeeServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_employees(self) -> ApiResult:
        return self._call(
            "list_employees", "GET", EMPLOYEES_PATH,
            parse=lambda body: [EmployeeResponse.model_validate(e) for e in body],
        )

    def get_employee(self, employee_id: int) -> ApiResult:
        return self._call(
            "get_employee", "GET", f"{EMPLOYEES_PATH}/{employee_id}",
            parse=EmployeeResponse.model_validate,
        )

    def create_employee(self, fields: EmployeeFields) -> ApiResult:
        return self._call(
            "create_employee", "POST", EMPLOYEES_PATH,
            json=_to_body(fields),
            parse=EmployeeResponse.model_validate,
        )

    def update_employee(self, employee_id: int, fields: EmployeeFields) -> ApiResult:
        return self._call(
            "update_employee", "PUT", f"{EMPLOYEES_PATH}/{employee_id}",
            json=_to_body(fields),
            parse=EmployeeResponse.model_validate,
        )

    def delete_employee(self, employee_id: int) -> ApiResult:
        return self._call(
            "delete_employee", "DELETE", f"{EMPLOYEES_PATH}/{employee_id}",
            parse=MessageResponse.model_validate,
        )

    def _call(
        self, op: str, method: str, url: str, *,
        parse, json: dict | None = None,
    ) -> ApiResult:
        try:
            response = self._http.request(method, url, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{op} failed: {e}")
            return ApiResult.failure(op, ApiError(
                code=NETWORK_ERROR,
                message="Could not reach the employee service",
            ))

        if response.is_success:
            try:
                return ApiResult.success(
                    op, response.status_code, parse(response.json()),
                )
            except (ValueError, ValidationError) as e:
                logger.warning(f"{op} returned an unreadable body: {e}")
                return ApiResult.failure(op, ApiError(
                    code=UNEXPECTED_RESPONSE,
                    message="The employee service sent an unexpected response",
                    status_code=response.status_code,
                ))

        return ApiResult.failure(op, _error_from_response(response))


def _to_body(fields: EmployeeFields) -> dict[str, str]:
    return {
        "firstName": fields.first_name,
        "lastName": fields.last_name,
        "email": fields.email,
    }


def _error_from_response(response: httpx.Response) -> ApiError:
    try:
        envelope: Any = response.json()
    except ValueError:
        envelope = None
    error = envelope.get("error") if isinstance(envelope, dict) else None
    if not isinstance(error, dict):
        return ApiError(
            code=f"HTTP_{response.status_code}",
            message=response.reason_phrase or "Request failed",
            status_code=response.status_code,
        )

    fields: dict[str, str] = {}
    for detail in error.get("details") or []:
        # loc is "body.firstName" for request-body fields
        name = str(detail.get("field", "")).split(".")[-1]
        if name:
            fields.setdefault(to_snake(name), detail.get("message", ""))
    return ApiError(
        code=error.get("code", f"HTTP_{response.status_code}"),
        message=error.get("message", "Request failed"),
        status_code=response.status_code,
        fields=fields,
    )
