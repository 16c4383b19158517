"""Task API Package — CRUD REST service for the `tasks` table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
