"""Terminal Frontend — renders the list and form views with Rich and drives them.

The app loop reads the current route, mounts the matching view, performs the
client call the view asks for, and feeds the ApiResult back into the view.
Rendering functions write to any Console, so tests use a StringIO-backed one.
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.theme import Theme

from ems.client.employee_service import EmployeeServiceClient
from ems.core.domain_types import FormMode, FormState, ListState
from ems.ui.form_view import EDITABLE_FIELDS, EmployeeFormView
from ems.ui.list_view import EmployeeListView
from ems.ui.router import FORM, LIST, Router, edit_path

EMS_THEME = Theme(
    {
        "ems.title": "bold cyan",
        "ems.ok": "bold green",
        "ems.error": "bold red",
        "ems.muted": "dim",
        "ems.id": "bold blue",
    }
)

FIELD_PROMPTS = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "email": "Email Address",
}

LIST_HELP = (
    "[a]dd  [e]dit <id>  [d]elete <id>  [s]earch <term>  "
    "[c]lear search  [r]efresh  [q]uit"
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=EMS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_list(view: EmployeeListView, console: Console) -> None:
    console.rule("[ems.title]Employee Management[/]")
    if view.state == ListState.LOADING:
        console.print("[ems.muted]Loading employees...[/]")
        return
    if view.notice:
        console.print(f"[ems.ok]{escape(view.notice)}[/]")
    if view.error:
        console.print(f"[ems.error]{escape(view.error)}[/]")
    if view.state != ListState.LOADED:
        return

    if view.search_term:
        console.print(f"Search: [bold]{escape(view.search_term)}[/]")
    rows = view.filtered
    if rows:
        table = Table(show_lines=False)
        table.add_column("S.No", justify="right")
        table.add_column("ID", style="ems.id", justify="right")
        table.add_column("First Name")
        table.add_column("Last Name")
        table.add_column("Email")
        for index, employee in enumerate(rows, start=1):
            table.add_row(
                str(index), str(employee.id),
                escape(employee.first_name), escape(employee.last_name),
                escape(employee.email),
            )
        console.print(table)
    else:
        console.print("[ems.muted]No employees to show.[/]")
    console.print(f"[ems.muted]{view.summary}[/]")


def render_form(view: EmployeeFormView, console: Console) -> None:
    console.rule(f"[ems.title]{view.title}[/]")
    if view.state == FormState.LOADING:
        console.print("[ems.muted]Loading employee...[/]")
        return
    if view.alert:
        console.print(f"[ems.error]{escape(view.alert)}[/]")
    if view.state == FormState.ERROR:
        return
    for name in EDITABLE_FIELDS:
        value = getattr(view, name)
        console.print(f"{FIELD_PROMPTS[name]}: {escape(value)}")
        if name in view.errors:
            console.print(f"  [ems.error]{escape(view.errors[name])}[/]")


class ConsoleApp:
    """Interactive list/form frontend over an EmployeeServiceClient."""

    def __init__(
        self,
        client: EmployeeServiceClient,
        console: Console | None = None,
        input_stream: TextIO | None = None,
    ):
        self.client = client
        self.console = console or Console(theme=EMS_THEME)
        self.router = Router()
        self.list_view = EmployeeListView()
        self._stream = input_stream
        self._running = False

    def run(self) -> None:
        self._running = True
        while self._running:
            route = self.router.current
            if route.view == FORM:
                self.show_form(EmployeeFormView(employee_id=route.employee_id))
            else:
                self.show_list()

    def navigate(self, path: str) -> None:
        route = self.router.navigate(path)
        if route.view == LIST:
            # returning to the list always refetches
            self.list_view.state = ListState.IDLE

    # ─── List screen ────────────────────────────────────────────

    def load_list(self) -> None:
        self.list_view.start_loading()
        self.list_view.apply_load(self.client.list_employees())

    def show_list(self) -> None:
        if self.list_view.state == ListState.IDLE:
            self.load_list()
        render_list(self.list_view, self.console)
        self.list_view.notice = None
        self.console.print(f"[ems.muted]{LIST_HELP}[/]")
        command = self._ask("Command", default="q")
        self.handle_list_command(command)

    def handle_list_command(self, command: str) -> None:
        action, _, arg = command.strip().partition(" ")
        action = action.lower()
        arg = arg.strip()
        if action in ("q", "quit"):
            self._running = False
        elif action in ("a", "add"):
            self.navigate("/add-employee")
        elif action in ("e", "edit") and arg.isdigit():
            self.navigate(edit_path(int(arg)))
        elif action in ("d", "delete") and arg.isdigit():
            self.delete(int(arg))
        elif action in ("s", "search"):
            self.list_view.set_search(arg)
        elif action in ("c", "clear"):
            self.list_view.clear_search()
        elif action in ("r", "refresh"):
            self.load_list()
        else:
            self.console.print(f"[ems.error]Unknown command: {escape(command)}[/]")

    def delete(self, employee_id: int) -> None:
        question = self.list_view.request_delete(employee_id)
        if not self._confirm(question):
            self.list_view.cancel_delete()
            return
        target = self.list_view.confirm_delete()
        result = self.client.delete_employee(target)
        if self.list_view.apply_delete(result):
            self.load_list()

    # ─── Form screen ────────────────────────────────────────────

    def show_form(self, view: EmployeeFormView) -> None:
        if view.start_loading():
            view.apply_load(self.client.get_employee(view.employee_id))
            if view.state == FormState.ERROR:
                # nothing to edit; the record is gone or the service is down
                render_form(view, self.console)
                self.navigate(view.cancel())
                return
        while True:
            render_form(view, self.console)
            for name in EDITABLE_FIELDS:
                view.set_field(
                    name, self._ask(FIELD_PROMPTS[name], default=getattr(view, name)),
                )
            if not self._confirm(f"{view.submit_label}?"):
                self.navigate(view.cancel())
                return
            fields = view.submit()
            if fields is None:
                continue
            if view.mode == FormMode.EDIT:
                result = self.client.update_employee(view.employee_id, fields)
            else:
                result = self.client.create_employee(fields)
            target = view.apply_submit(result)
            if target:
                self.navigate(target)
                return

    # ─── Input ──────────────────────────────────────────────────

    def _ask(self, prompt: str, default: str = "") -> str:
        return Prompt.ask(
            prompt, console=self.console, default=default,
            show_default=bool(default), stream=self._stream,
        )

    def _confirm(self, question: str) -> bool:
        return Confirm.ask(
            question, console=self.console, default=False, stream=self._stream,
        )
