"""Employee Form View — create/edit form with synchronous validation.

Invariants:
    - mode is EDIT exactly when a route-supplied employee id is present
    - submit() validates before any request: on failure it returns None and
      sets one message per failing field
    - a successful save navigates back to the list; remote errors become a
      page-level alert and leave the form editable
"""

from dataclasses import dataclass, field

from ems.client.result import ApiResult
from ems.core.domain_types import EmployeeFields, FormMode, FormState
from ems.core.validation import validate_employee_fields

LIST_ROUTE = "/employees"
EDITABLE_FIELDS = ("first_name", "last_name", "email")


@dataclass
class EmployeeFormView:
    employee_id: int | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    errors: dict[str, str] = field(default_factory=dict)
    alert: str | None = None
    state: FormState = FormState.EDITING

    @property
    def mode(self) -> FormMode:
        return FormMode.EDIT if self.employee_id is not None else FormMode.CREATE

    @property
    def title(self) -> str:
        return "Update Employee" if self.mode == FormMode.EDIT else "Add New Employee"

    @property
    def submit_label(self) -> str:
        return "Update Employee" if self.mode == FormMode.EDIT else "Add Employee"

    def start_loading(self) -> bool:
        """Edit mode fetches the record on mount; returns False in create mode."""
        if self.mode != FormMode.EDIT:
            return False
        self.state = FormState.LOADING
        return True

    def apply_load(self, result: ApiResult) -> None:
        if result.ok:
            self.first_name = result.data.first_name
            self.last_name = result.data.last_name
            self.email = result.data.email
            self.state = FormState.EDITING
        else:
            self.state = FormState.ERROR
            self.alert = f"Error fetching employee data: {result.error.message}"

    def set_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        setattr(self, name, value)

    def validate(self) -> bool:
        self.errors = validate_employee_fields(
            self.first_name, self.last_name, self.email,
        )
        return not self.errors

    def submit(self) -> EmployeeFields | None:
        """Validate and, when valid, return the payload to send."""
        if not self.validate():
            return None
        self.alert = None
        self.state = FormState.SUBMITTING
        return EmployeeFields(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )

    def apply_submit(self, result: ApiResult) -> str | None:
        """Record the save outcome; returns the route to navigate to on success."""
        if result.ok:
            self.state = FormState.SAVED
            return LIST_ROUTE
        self.state = FormState.EDITING
        verb = "updating" if self.mode == FormMode.EDIT else "creating"
        self.alert = f"Error {verb} employee: {result.error.message}"
        self.errors.update(result.error.fields)
        return None

    def cancel(self) -> str:
        return LIST_ROUTE
