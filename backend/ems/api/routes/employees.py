"""Employee Routes — stateless CRUD endpoints over the employees table.

Invariants:
    - One handler per repository operation; no business logic in routes
    - Request bodies validated by EmployeeCreate before reaching the handler
    - Repository errors (NotFound, Conflict, StoreUnavailable) propagate to the
      global error handlers, which own the status-code mapping

Design Decisions:
    - Repository injected via Depends(get_employee_repository): tests can swap it
      without touching the database dependency
    - PUT is a full replace and reuses the create schema
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ems.core.domain_types import EmployeeId
from ems.core.repository_protocols import EmployeeRepository
from ems.infrastructure.database import get_db
from ems.repositories.employee_repository import SqlEmployeeRepository
from ems.schemas.employee import EmployeeCreate, EmployeeResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/employees", tags=["employees"])

DELETE_CONFIRMATION = "Employee deleted successfully!"


def get_employee_repository(
    db: AsyncSession = Depends(get_db),
) -> EmployeeRepository:
    return SqlEmployeeRepository(db)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    """List every employee, id ascending."""
    employees = await repo.list_all()
    return [EmployeeResponse.from_record(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee = await repo.get_by_id(EmployeeId(employee_id))
    return EmployeeResponse.from_record(employee)


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee = await repo.create(body.to_fields())
    return EmployeeResponse.from_record(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    body: EmployeeCreate,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee = await repo.update(EmployeeId(employee_id), body.to_fields())
    return EmployeeResponse.from_record(employee)


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    await repo.delete(EmployeeId(employee_id))
    return MessageResponse(message=DELETE_CONFIRMATION)
