"""Employee List View — state machine behind the employee table.

Invariants:
    - state moves idle -> loading -> loaded | error; every load goes back through loading
    - employees and filtered results are always id-ascending
    - a blank search term shows every record; otherwise a case-insensitive
      substring match over first name, last name and email
    - delete needs request_delete() then confirm_delete(); a successful delete
      asks for a full refetch (records are never removed locally)

Design Decisions:
    - Transitions are synchronous and take ApiResult values: the frontend does
      the IO, the view only decides what the screen shows next
"""

from dataclasses import dataclass, field

from ems.client.result import ApiResult
from ems.core.domain_types import ListState
from ems.schemas.employee import EmployeeResponse


@dataclass
class EmployeeListView:
    state: ListState = ListState.IDLE
    employees: list[EmployeeResponse] = field(default_factory=list)
    search_term: str = ""
    error: str | None = None
    notice: str | None = None
    pending_delete: EmployeeResponse | None = None
    _deleting: tuple[int, str] | None = field(default=None, init=False, repr=False)

    # ─── Loading ────────────────────────────────────────────────

    def start_loading(self) -> None:
        self.state = ListState.LOADING
        self.error = None

    def apply_load(self, result: ApiResult) -> None:
        if result.ok:
            self.employees = sorted(result.data, key=lambda e: e.id)
            self.state = ListState.LOADED
        else:
            self.state = ListState.ERROR
            self.error = f"Error fetching employees: {result.error.message}"

    # ─── Search ─────────────────────────────────────────────────

    def set_search(self, term: str) -> None:
        self.search_term = term

    def clear_search(self) -> None:
        self.search_term = ""

    @property
    def filtered(self) -> list[EmployeeResponse]:
        if self.state != ListState.LOADED:
            return []
        if not self.search_term.strip():
            return list(self.employees)
        term = self.search_term.lower()
        return [
            e for e in self.employees
            if term in e.first_name.lower()
            or term in e.last_name.lower()
            or term in e.email.lower()
        ]

    @property
    def summary(self) -> str:
        total = len(self.employees)
        if not self.search_term:
            return f"Total: {total} employees"
        shown = len(self.filtered)
        text = f"Showing {shown} of {total} employees"
        if shown == 0:
            text += " - No matches found"
        return text

    # ─── Delete ─────────────────────────────────────────────────

    def request_delete(self, employee_id: int) -> str:
        """Select a record for deletion and return the confirmation question."""
        target = next((e for e in self.employees if e.id == employee_id), None)
        self.pending_delete = target
        self._deleting = (employee_id, target.full_name if target else "this employee")
        return (
            f"Are you sure you want to delete {self._deleting[1]}? "
            "This action cannot be undone."
        )

    def confirm_delete(self) -> int | None:
        """User confirmed; returns the id to delete, or None if nothing was requested."""
        if self._deleting is None:
            return None
        self.pending_delete = None
        return self._deleting[0]

    def cancel_delete(self) -> None:
        self.pending_delete = None
        self._deleting = None

    def apply_delete(self, result: ApiResult) -> bool:
        """Record the delete outcome. Returns True when the list must be refetched."""
        name = self._deleting[1] if self._deleting else "Employee"
        self._deleting = None
        if result.ok:
            self.notice = f"{name} has been successfully deleted."
            self.error = None
            return True
        self.notice = None
        self.error = f"Error deleting employee: {result.error.message}"
        return False
