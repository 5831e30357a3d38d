"""Boundary Protocols — contract between the API layer and the record store.

Invariants:
    - Routes depend on EmployeeRepository, never on a concrete SQLAlchemy class
    - Every method raises typed errors from core/errors.py, never driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from ems.core.domain_types import EmployeeFields, EmployeeId


class EmployeeRecord(Protocol):
    """Structural contract for employee rows handed to the API layer."""
    id: int
    first_name: str
    last_name: str
    email: str


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by repositories/."""
    async def list_all(self) -> list[EmployeeRecord]: ...
    async def get_by_id(self, employee_id: EmployeeId) -> EmployeeRecord: ...
    async def create(self, fields: EmployeeFields) -> EmployeeRecord: ...
    async def update(
        self, employee_id: EmployeeId, fields: EmployeeFields,
    ) -> EmployeeRecord: ...
    async def delete(self, employee_id: EmployeeId) -> None: ...
