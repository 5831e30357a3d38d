"""Employee Management System — REST API, HTTP client, and terminal frontend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
