"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the integer primary key: never use a bare int for an id in services
    - Valid ids lie in 1..MAX_TASK_ID; anything outside is rejected before SQL
    - EDITABLE_FIELDS is the single list of columns an update may write

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)

# tasks.id is a Postgres INTEGER (serial)
MAX_TASK_ID = 2_147_483_647


# ─── Field Sets ──────────────────────────────────────────────────

EDITABLE_FIELDS: tuple[str, ...] = ("descripcion", "observacion", "is_finalizada")
