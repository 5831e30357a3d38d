"""Terminal Frontend — rendering and scripted sessions against a fake client.

Tests cover:
    - table rendering, counts, alerts and inline field errors
    - delete confirms before calling the service, then refetches
    - add flow validates locally before any request
    - edit flow prefills from the service and sends an update
    - edit flow on a missing record alerts and returns to the list
"""

from io import StringIO

from ems.client.result import ApiResult
from ems.ui.console import (
    ConsoleApp, create_console, get_output, render_form, render_list,
)
from ems.ui.form_view import EmployeeFormView
from ems.ui.list_view import EmployeeListView


def _run(fake_client, script: str) -> tuple[ConsoleApp, str]:
    console = create_console(no_color=True)
    app = ConsoleApp(fake_client, console=console, input_stream=StringIO(script))
    app.run()
    return app, get_output(console)


# ─── Rendering ───────────────────────────────────────────────────

def test_render_list_shows_rows_and_total(staff):
    view = EmployeeListView()
    view.apply_load(ApiResult.success("list_employees", 200, staff))
    console = create_console(no_color=True)
    render_list(view, console)
    output = get_output(console)
    assert "Employee Management" in output
    assert "jane@x.com" in output
    assert "Total: 3 employees" in output


def test_render_list_shows_no_matches(staff):
    view = EmployeeListView()
    view.apply_load(ApiResult.success("list_employees", 200, staff))
    view.set_search("zzz")
    console = create_console(no_color=True)
    render_list(view, console)
    assert "No matches found" in get_output(console)


def test_render_form_shows_field_errors():
    view = EmployeeFormView()
    view.set_field("first_name", "J")
    view.submit()
    console = create_console(no_color=True)
    render_form(view, console)
    output = get_output(console)
    assert "Add New Employee" in output
    assert "First name must be at least 2 characters" in output
    assert "Email is required" in output


# ─── Sessions ────────────────────────────────────────────────────

def test_quit_immediately_loads_once(fake_client):
    _, output = _run(fake_client, "q\n")
    assert fake_client.calls == [("list",)]
    assert "Carol" in output


def test_delete_confirmed_then_refetches(fake_client):
    _, output = _run(fake_client, "d 1\ny\nq\n")
    assert ("delete", 1) in fake_client.calls
    assert fake_client.calls.count(("list",)) == 2
    assert "Jane Doe has been successfully deleted." in output


def test_delete_declined_sends_nothing(fake_client):
    _, _ = _run(fake_client, "d 1\nn\nq\n")
    assert ("delete", 1) not in fake_client.calls
    assert 1 in fake_client.employees


def test_add_employee_then_back_to_refreshed_list(fake_client):
    _, output = _run(fake_client, "a\nAnn\nLee\nann@x.com\ny\nq\n")
    created = [c for c in fake_client.calls if c[0] == "create"]
    assert len(created) == 1
    assert created[0][1].email == "ann@x.com"
    assert fake_client.calls.count(("list",)) == 2
    assert "ann@x.com" in output


def test_add_with_invalid_fields_sends_nothing(fake_client):
    # second pass hits end of input: defaults are kept and the form is cancelled
    _, output = _run(fake_client, "a\nJ\nLee\nbad\ny\n")
    assert not [c for c in fake_client.calls if c[0] == "create"]
    assert "First name must be at least 2 characters" in output
    assert "Please enter a valid email address" in output


def test_edit_prefills_and_updates(fake_client):
    _, _ = _run(fake_client, "e 2\nJohnny\nSmith\njsmith@x.com\ny\nq\n")
    assert ("get", 2) in fake_client.calls
    updates = [c for c in fake_client.calls if c[0] == "update"]
    assert updates[0][1] == 2
    assert fake_client.employees[2].first_name == "Johnny"


def test_edit_missing_record_returns_to_list(fake_client):
    _, output = _run(fake_client, "e 99\nq\n")
    assert ("get", 99) in fake_client.calls
    assert not [c for c in fake_client.calls if c[0] == "update"]
    assert fake_client.calls.count(("list",)) == 2
    assert "Error fetching employee data: Employee not found" in output
    assert "First Name:" not in output


def test_search_filters_rows(fake_client):
    _, output = _run(fake_client, "s smith\nq\n")
    assert "Showing 1 of 3 employees" in output
