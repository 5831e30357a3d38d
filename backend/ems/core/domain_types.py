"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps int — assigned by the store, never reused
    - EmployeeFields is the full set of user-editable fields (update is a full replace)
    - All view states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclass for EmployeeFields: the record layer receives an immutable value
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class EmployeeFields:
    """The three editable fields of an employee."""
    first_name: str
    last_name: str
    email: str


# ─── Enums ───────────────────────────────────────────────────────

class ListState(str, Enum):
    """List view lifecycle: idle -> loading -> loaded | error."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class FormMode(str, Enum):
    """Form view mode — selected by presence of a route-supplied id."""
    CREATE = "create"
    EDIT = "edit"


class FormState(str, Enum):
    """Form view lifecycle."""
    EDITING = "editing"
    LOADING = "loading"
    SUBMITTING = "submitting"
    SAVED = "saved"
    ERROR = "error"
