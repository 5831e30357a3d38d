"""UI Layer — list/form view state machines, client-side router, and terminal frontend.

Invariants:
    - Views never perform IO; they consume ApiResult values handed in by the frontend
    - Field validation runs in the form view before any request is sent
"""
