"""Employee ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key (assigned by the store)
    - id is a signed 64-bit value on every backend (MAX_EMPLOYEE_ID)
    - email is unique across all rows (named constraint uq_employees_email)
    - created_at / updated_at are system-managed, never set from user input

Design Decisions:
    - Named unique constraint: lets the record layer recognize email
      violations in driver messages across SQLite, PostgreSQL and MySQL
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, String, Integer, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ems.db.base import Base


MAX_EMPLOYEE_ID = 2**63 - 1

# SQLite only autoincrements an INTEGER PRIMARY KEY, which is already 64-bit there
_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(Base):
    """Employee record."""
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
        # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        _ID_TYPE, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} email={self.email!r}>"
