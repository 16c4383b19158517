"""Task schema validation — optional fields, coercion, stripping, limits."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from task_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate


def test_create_accepts_empty_payload():
    body = TaskCreate()
    assert body.descripcion is None
    assert body.is_finalizada is None


def test_create_coerces_numbers_to_text():
    body = TaskCreate(descripcion=12, observacion=1.5)
    assert body.descripcion == "12"
    assert body.observacion == "1.5"


def test_create_coerces_booleans_to_lowercase_text():
    body = TaskCreate(descripcion=True, observacion=False)
    assert body.descripcion == "true"
    assert body.observacion == "false"


def test_create_strips_text():
    assert TaskCreate(descripcion="  hola  ").descripcion == "hola"


def test_create_accepts_truthy_flag_strings():
    assert TaskCreate(is_finalizada="true").is_finalizada is True


def test_descripcion_max_length_enforced():
    with pytest.raises(ValidationError):
        TaskCreate(descripcion="x" * 10_001)


def test_update_exclude_unset_only_reports_sent_fields():
    body = TaskUpdate(is_finalizada=True)
    assert body.model_dump(exclude_unset=True) == {"is_finalizada": True}


def test_response_reads_from_attributes():
    row = SimpleNamespace(
        id=4, descripcion="d", observacion=None, is_finalizada=False,
        registration_date=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
    resp = TaskResponse.model_validate(row)
    assert resp.id == 4
    assert resp.observacion is None
