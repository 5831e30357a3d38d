"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Wire format is camelCase (firstName, lastName, email); Python side is snake_case
    - EmployeeCreate enforces the same rules as the form view (core/validation.py)
    - Submitted values are stored as sent; whitespace is only ignored when measuring length
    - EmployeeResponse never exposes timestamps (public shape is id + three fields)

Design Decisions:
    - alias_generator=to_camel with populate_by_name: one model serves requests,
      responses, and the HTTP client's parsing
    - field_validator raising ValueError: FastAPI turns it into a 400 with field details
"""

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from ems.core.domain_types import EmployeeFields
from ems.core.repository_protocols import EmployeeRecord
from ems.core.validation import FIELD_LABELS, check_email, check_name


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class EmployeeCreate(_CamelModel):
    """Create/update request body — full replace of the editable fields."""
    first_name: str
    last_name: str
    email: str

    @field_validator("first_name", "last_name")
    @classmethod
    def check_name_length(cls, v: str, info: ValidationInfo) -> str:
        message = check_name(v, FIELD_LABELS[info.field_name])
        if message:
            raise ValueError(message)
        return v

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        message = check_email(v)
        if message:
            raise ValueError(message)
        return v

    def to_fields(self) -> EmployeeFields:
        return EmployeeFields(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )


class EmployeeResponse(_CamelModel):
    """Public employee representation."""
    id: int
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        return cls(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class MessageResponse(BaseModel):
    """Plain confirmation message (delete, health)."""
    message: str
