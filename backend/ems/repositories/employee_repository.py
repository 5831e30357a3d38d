"""Employee Repository — parameterized CRUD statements against the employees table.

Invariants:
    - list_all() is ordered by id ascending
    - Each mutating method issues one write statement touching one row, then commits
    - update() never inserts; delete() is a hard delete
    - ids outside 1..MAX_EMPLOYEE_ID are NotFound without touching the store
    - Unique violations on email become EmailConflictError; any other integrity
      failure becomes StoreUnavailableError (no driver detail leaked)

Design Decisions:
    - Core UPDATE/DELETE statements over load-modify-save: rowcount gives NotFound
      without a prior SELECT, and the store's own atomicity covers each call
    - Receives the AsyncSession from the caller (injected store handle)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ems.core.domain_types import EmployeeFields, EmployeeId
from ems.core.errors import (
    EmailConflictError, EmployeeNotFoundError, InvalidInputError,
    StoreUnavailableError,
)
from ems.core.validation import FIELD_LABELS
from ems.models.employee import MAX_EMPLOYEE_ID, Employee

logger = logging.getLogger(__name__)


def is_email_conflict(exc: IntegrityError) -> bool:
    """True when the driver reports a unique violation on the email column."""
    detail = str(exc.orig).lower()
    return "email" in detail and ("unique" in detail or "duplicate" in detail)


def _translate_integrity_error(exc: IntegrityError, email: str) -> Exception:
    if is_email_conflict(exc):
        return EmailConflictError(email)
    logger.error(f"Unrecognized integrity error: {exc}")
    return StoreUnavailableError("write")


def _require_storable_id(employee_id: EmployeeId) -> None:
    # ids outside the column range cannot exist; the driver would overflow binding them
    if not 1 <= employee_id <= MAX_EMPLOYEE_ID:
        raise EmployeeNotFoundError(employee_id)


def _require_fields(fields: EmployeeFields) -> None:
    for name in ("first_name", "last_name", "email"):
        value = getattr(fields, name)
        if value is None or not str(value).strip():
            raise InvalidInputError(
                f"{FIELD_LABELS[name]} is required", field=name,
            )


class SqlEmployeeRepository:
    """SQLAlchemy implementation of core.repository_protocols.EmployeeRepository."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Employee]:
        result = await self._db.execute(
            select(Employee).order_by(Employee.id.asc()),
        )
        return list(result.scalars().all())

    async def get_by_id(self, employee_id: EmployeeId) -> Employee:
        _require_storable_id(employee_id)
        result = await self._db.execute(
            select(Employee).where(Employee.id == employee_id),
        )
        employee = result.scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create(self, fields: EmployeeFields) -> Employee:
        _require_fields(fields)
        employee = Employee(
            first_name=fields.first_name,
            last_name=fields.last_name,
            email=fields.email,
        )
        self._db.add(employee)
        try:
            await self._db.flush()
        except IntegrityError as e:
            await self._db.rollback()
            raise _translate_integrity_error(e, fields.email)
        await self._db.commit()
        await self._db.refresh(employee)
        logger.info("Employee created", extra={"employee_id": employee.id})
        return employee

    async def update(
        self, employee_id: EmployeeId, fields: EmployeeFields,
    ) -> Employee:
        _require_storable_id(employee_id)
        _require_fields(fields)
        stmt = (
            update(Employee)
            .where(Employee.id == employee_id)
            .values(
                first_name=fields.first_name,
                last_name=fields.last_name,
                email=fields.email,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._db.execute(stmt)
        except IntegrityError as e:
            await self._db.rollback()
            raise _translate_integrity_error(e, fields.email)
        if result.rowcount == 0:
            await self._db.rollback()
            raise EmployeeNotFoundError(employee_id)
        await self._db.commit()
        logger.info("Employee updated", extra={"employee_id": employee_id})
        # identity map may hold a stale copy from an earlier read in this session
        self._db.expire_all()
        return await self.get_by_id(employee_id)

    async def delete(self, employee_id: EmployeeId) -> None:
        _require_storable_id(employee_id)
        result = await self._db.execute(
            delete(Employee)
            .where(Employee.id == employee_id)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            await self._db.rollback()
            raise EmployeeNotFoundError(employee_id)
        await self._db.commit()
        logger.info("Employee deleted", extra={"employee_id": employee_id})
