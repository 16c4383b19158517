"""Task Fields — pure coercion and merge rules for task payloads.

Invariants:
    - build_new_task always returns all four insertable columns
    - merge_task_update only ever returns EDITABLE_FIELDS
    - None in an update payload means "not provided", never "clear the column"
"""

from datetime import datetime
from typing import Any, Mapping

from task_api.core.domain_types import EDITABLE_FIELDS


def build_new_task(data: Mapping[str, Any], now: datetime) -> dict:
    """Coerce creation input into a row for INSERT. Pure, no IO."""
    observacion = data.get("observacion")
    is_finalizada = data.get("is_finalizada")
    return {
        "descripcion": str(data["descripcion"]),
        "observacion": str(observacion) if observacion is not None else None,
        "is_finalizada": bool(is_finalizada) if is_finalizada is not None else False,
        "registration_date": now,
    }


def merge_task_update(current: Mapping[str, Any], changes: Mapping[str, Any]) -> dict:
    """Overlay provided changes on the current editable fields."""
    merged = {name: current.get(name) for name in EDITABLE_FIELDS}
    for name in EDITABLE_FIELDS:
        value = changes.get(name)
        if value is not None:
            merged[name] = value
    return merged


def task_to_fields(task: Any) -> dict:
    """Read the editable fields off a task object."""
    return {name: getattr(task, name) for name in EDITABLE_FIELDS}


def is_blank(value: Any) -> bool:
    """True for None, empty and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
