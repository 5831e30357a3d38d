"""Database Infrastructure — SQLAlchemy Base and schema bootstrap.

Invariants:
    - All sessions are async (AsyncSession)
    - Schema creation is idempotent (CREATE TABLE IF NOT EXISTS semantics)
"""
