"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, client/, ui/, infrastructure/, or db/
    - Field rules and error types are shared by the server and the frontend

Design Decisions:
    - Functional core separated from imperative shell
"""
