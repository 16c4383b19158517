"""Tests for task field coercion and merge — pure, no IO."""

from datetime import datetime, timezone
from types import SimpleNamespace

from task_api.core.task_fields import (
    build_new_task, is_blank, merge_task_update, task_to_fields,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_build_new_task_defaults_optional_fields():
    row = build_new_task({"descripcion": "Barrer"}, NOW)
    assert row == {
        "descripcion": "Barrer",
        "observacion": None,
        "is_finalizada": False,
        "registration_date": NOW,
    }


def test_build_new_task_coerces_types():
    row = build_new_task(
        {"descripcion": 7, "observacion": 3.5, "is_finalizada": 1}, NOW,
    )
    assert row["descripcion"] == "7"
    assert row["observacion"] == "3.5"
    assert row["is_finalizada"] is True


def test_build_new_task_keeps_false_flag():
    row = build_new_task({"descripcion": "x", "is_finalizada": False}, NOW)
    assert row["is_finalizada"] is False


def test_merge_overlays_provided_fields():
    current = {"descripcion": "a", "observacion": "b", "is_finalizada": False}
    merged = merge_task_update(current, {"observacion": "nueva"})
    assert merged == {"descripcion": "a", "observacion": "nueva", "is_finalizada": False}


def test_merge_treats_none_as_not_provided():
    current = {"descripcion": "a", "observacion": "b", "is_finalizada": True}
    merged = merge_task_update(current, {"descripcion": None, "is_finalizada": None})
    assert merged == current


def test_merge_applies_false_flag():
    current = {"descripcion": "a", "observacion": None, "is_finalizada": True}
    merged = merge_task_update(current, {"is_finalizada": False})
    assert merged["is_finalizada"] is False


def test_merge_ignores_non_editable_keys():
    current = {"descripcion": "a", "observacion": None, "is_finalizada": False}
    merged = merge_task_update(
        current, {"id": 99, "registration_date": NOW, "is_premium": True},
    )
    assert set(merged) == {"descripcion", "observacion", "is_finalizada"}


def test_task_to_fields_reads_editable_attributes():
    task = SimpleNamespace(
        id=1, descripcion="a", observacion="b", is_finalizada=True,
        registration_date=NOW,
    )
    assert task_to_fields(task) == {
        "descripcion": "a", "observacion": "b", "is_finalizada": True,
    }


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("x")
    assert not is_blank(0)
