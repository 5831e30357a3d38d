"""Record Access Layer — SQLAlchemy implementations of core repository protocols."""
