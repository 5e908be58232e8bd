from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Garante que o pacote projects_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from projects_api.domain import (  # noqa: E402
    Found,
    NotFound,
    NotFoundError,
    ProjectPatch,
    StoreError,
    ValidationError,
)
import projects_api.repositories.memory_repository as memory_repository  # noqa: E402
from projects_api.repositories.memory_repository import InMemoryRepository  # noqa: E402
from projects_api.services.project_service import ProjectService  # noqa: E402


class _CountingStore(InMemoryRepository):
    def __init__(self) -> None:
        super().__init__()
        self.writes = 0

    def insert(self, candidate):
        self.writes += 1
        return super().insert(candidate)

    def update_by_id(self, project_id, patch):
        self.writes += 1
        return super().update_by_id(project_id, patch)


class _BrokenStore:
    def _fail(self, *args, **kwargs):
        raise StoreError("armazenamento indisponivel")

    insert = list_all = find_by_id = update_by_id = delete_by_id = _fail


@pytest.fixture()
def store():
    return _CountingStore()


@pytest.fixture()
def svc(store):
    return ProjectService(store)


def test_create_then_get_by_id_round_trips(svc):
    created = svc.create("Alpha", "first project")

    result = svc.get_by_id(created.id)

    assert isinstance(result, Found)
    assert result.record.name == "Alpha"
    assert result.record.description == "first project"


def test_get_all_counts_creations(svc):
    assert svc.get_all() == []

    created = [svc.create(f"Project {i}") for i in range(4)]

    listed = svc.get_all()
    assert len(listed) == 4
    assert {p.id for p in listed} == {p.id for p in created}


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_create_rejects_empty_name_without_writing(svc, store, name):
    with pytest.raises(ValidationError):
        svc.create(name)

    assert store.writes == 0
    assert svc.get_all() == []


def test_create_rejects_non_text_description(svc, store):
    with pytest.raises(ValidationError):
        svc.create("Alpha", 42)
    assert store.writes == 0


def test_create_trims_name(svc):
    assert svc.create("  Alpha  ").name == "Alpha"


def test_update_name_keeps_description(svc):
    created = svc.create("Alpha", "keep me")

    svc.update(created.id, ProjectPatch(name="Beta"))

    record = svc.get_by_id(created.id).record
    assert record.name == "Beta"
    assert record.description == "keep me"


def test_update_without_description_never_clears_it(svc):
    created = svc.create("Alpha", "keep me")

    svc.update(created.id, ProjectPatch())
    svc.update(created.id, ProjectPatch(name="Gamma"))

    assert svc.get_by_id(created.id).record.description == "keep me"


def test_update_can_clear_description_explicitly(svc):
    created = svc.create("Alpha", "temporary")

    updated = svc.update(created.id, ProjectPatch(description=None))

    assert updated.description is None
    assert svc.get_by_id(created.id).record.description is None


def test_update_rejects_empty_name(svc, store):
    created = svc.create("Alpha")
    writes = store.writes

    with pytest.raises(ValidationError):
        svc.update(created.id, ProjectPatch(name="  "))

    assert store.writes == writes
    assert svc.get_by_id(created.id).record.name == "Alpha"


def test_update_missing_record_raises_not_found(svc):
    with pytest.raises(NotFoundError) as excinfo:
        svc.update("does-not-exist", ProjectPatch(name="x"))
    assert excinfo.value.project_id == "does-not-exist"


@pytest.mark.parametrize("bad_id", ["", "   ", "has space", "a/b", "x" * 65, None, 7])
def test_malformed_ids_are_validation_errors(svc, bad_id):
    with pytest.raises(ValidationError):
        svc.get_by_id(bad_id)
    with pytest.raises(ValidationError):
        svc.update(bad_id, ProjectPatch(name="x"))
    with pytest.raises(ValidationError):
        svc.delete(bad_id)


def test_get_by_id_missing_is_not_found_result(svc):
    result = svc.get_by_id("unknown")
    assert result == NotFound("unknown")


def test_delete_twice_raises_not_found(svc):
    created = svc.create("Alpha")

    assert svc.delete(created.id).success is True
    assert isinstance(svc.get_by_id(created.id), NotFound)

    with pytest.raises(NotFoundError):
        svc.delete(created.id)


def test_deleted_ids_are_not_reused(svc):
    first = svc.create("Alpha")
    svc.delete(first.id)

    second = svc.create("Alpha")

    assert second.id != first.id


def test_store_errors_propagate():
    svc = ProjectService(_BrokenStore())

    with pytest.raises(StoreError):
        svc.create("Alpha")
    with pytest.raises(StoreError):
        svc.get_all()
    with pytest.raises(StoreError):
        svc.get_by_id("abc")
    with pytest.raises(StoreError):
        svc.update("abc", ProjectPatch(name="x"))
    with pytest.raises(StoreError):
        svc.delete("abc")


def test_alpha_scenario(svc):
    created = svc.create("Alpha")
    assert created.id
    assert created.name == "Alpha"
    assert created.description is None

    assert svc.get_all() == [created]

    svc.update(created.id, ProjectPatch(description="first project"))
    record = svc.get_by_id(created.id).record
    assert (record.name, record.description) == ("Alpha", "first project")

    svc.delete(created.id)
    assert isinstance(svc.get_by_id(created.id), NotFound)


def test_name_length_limit(svc, store):
    assert svc.create("x" * 255).name == "x" * 255
    writes = store.writes

    with pytest.raises(ValidationError):
        svc.create("x" * 256)

    assert store.writes == writes


def test_updated_at_moves_on_update_but_not_on_empty_patch(svc, monkeypatch):
    created = svc.create("Alpha")
    later = datetime(2030, 1, 1, tzinfo=timezone.utc)

    class _Clock(datetime):
        @classmethod
        def now(cls, tz=None):
            return later

    monkeypatch.setattr(memory_repository, "datetime", _Clock)

    unchanged = svc.update(created.id, ProjectPatch())
    assert unchanged.updated_at == created.updated_at

    renamed = svc.update(created.id, ProjectPatch(name="Beta"))
    assert renamed.updated_at == later
    assert renamed.created_at == created.created_at

    described = svc.update(created.id, ProjectPatch(description="x"))
    assert described.updated_at == later


def test_rejected_input_is_logged(svc, caplog):
    caplog.set_level(logging.INFO, logger="projects_api.services.project_service")

    with pytest.raises(ValidationError):
        svc.create("   ")
    with pytest.raises(ValidationError):
        svc.delete("a b")

    messages = [r.getMessage() for r in caplog.records if r.name == "projects_api.services.project_service"]
    assert any(m.startswith("Rejected create input") for m in messages)
    assert any(m.startswith("Rejected delete input") for m in messages)
