"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from api/ or ui/
    - Driver exceptions are translated to core/errors.py types at this boundary
"""
