"""Client-side Router — maps frontend paths to views.

Routes:
    /, /employees             -> list
    /add-employee             -> form (create)
    /edit-employee/<id>       -> form (edit)
Unknown paths resolve to the list.
"""

import re
from dataclasses import dataclass, field

LIST = "list"
FORM = "form"

_EDIT_PATH = re.compile(r"^/edit-employee/(\d+)/?$")


@dataclass(frozen=True)
class Route:
    view: str
    path: str
    employee_id: int | None = None


def resolve(path: str) -> Route:
    if path in ("/add-employee", "/add-employee/"):
        return Route(FORM, path)
    match = _EDIT_PATH.match(path)
    if match:
        return Route(FORM, path, employee_id=int(match.group(1)))
    return Route(LIST, path)


def edit_path(employee_id: int) -> str:
    return f"/edit-employee/{employee_id}"


@dataclass
class Router:
    history: list[Route] = field(default_factory=lambda: [resolve("/employees")])

    @property
    def current(self) -> Route:
        return self.history[-1]

    def navigate(self, path: str) -> Route:
        route = resolve(path)
        self.history.append(route)
        return route

    def back(self) -> Route:
        if len(self.history) > 1:
            self.history.pop()
        return self.current
