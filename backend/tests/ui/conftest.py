"""UI fixtures — ApiResult builders and a scripted fake service client."""

import pytest

from ems.client.result import ApiError, ApiResult
from ems.schemas.employee import EmployeeResponse, MessageResponse


def employee(id, first, last, email) -> EmployeeResponse:
    return EmployeeResponse(id=id, first_name=first, last_name=last, email=email)


class FakeServiceClient:
    """In-memory stand-in for EmployeeServiceClient; records every call."""

    def __init__(self, employees=None):
        self.employees = {e.id: e for e in employees or []}
        self.calls: list[tuple] = []
        self.fail_next: ApiError | None = None

    def _fail(self, op):
        error, self.fail_next = self.fail_next, None
        return ApiResult.failure(op, error) if error else None

    def list_employees(self):
        self.calls.append(("list",))
        return self._fail("list_employees") or ApiResult.success(
            "list_employees", 200, list(self.employees.values()),
        )

    def get_employee(self, employee_id):
        self.calls.append(("get", employee_id))
        if employee_id not in self.employees:
            return ApiResult.failure("get_employee", ApiError(
                code="RESOURCE_NOT_FOUND", message="Employee not found", status_code=404,
            ))
        return ApiResult.success("get_employee", 200, self.employees[employee_id])

    def create_employee(self, fields):
        self.calls.append(("create", fields))
        failed = self._fail("create_employee")
        if failed:
            return failed
        new_id = max(self.employees, default=0) + 1
        self.employees[new_id] = employee(
            new_id, fields.first_name, fields.last_name, fields.email,
        )
        return ApiResult.success("create_employee", 201, self.employees[new_id])

    def update_employee(self, employee_id, fields):
        self.calls.append(("update", employee_id, fields))
        self.employees[employee_id] = employee(
            employee_id, fields.first_name, fields.last_name, fields.email,
        )
        return ApiResult.success("update_employee", 200, self.employees[employee_id])

    def delete_employee(self, employee_id):
        self.calls.append(("delete", employee_id))
        failed = self._fail("delete_employee")
        if failed:
            return failed
        self.employees.pop(employee_id)
        return ApiResult.success(
            "delete_employee", 200,
            MessageResponse(message="Employee deleted successfully!"),
        )


@pytest.fixture
def staff():
    return [
        employee(3, "Carol", "King", "carol@corp.io"),
        employee(1, "Jane", "Doe", "jane@x.com"),
        employee(2, "John", "Smith", "jsmith@x.com"),
    ]


@pytest.fixture
def fake_client(staff):
    return FakeServiceClient(staff)
