"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - The HTTP client parses responses with the same models the server emits

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
