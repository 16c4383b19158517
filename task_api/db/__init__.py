"""Database Layer — SQLAlchemy declarative Base and the task repository.

Invariants:
    - All statements are built with the SQLAlchemy expression language (bound parameters)
"""
