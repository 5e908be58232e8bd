"""
Project use cases: validate input, call the record store, return records.

The service keeps no state besides the store handle it was built with, so a
single instance can serve concurrent requests.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from projects_api.domain.errors import NotFoundError, ValidationError
from projects_api.domain.projects import (
    UNSET,
    DeleteAck,
    Found,
    LookupResult,
    NotFound,
    ProjectCandidate,
    ProjectPatch,
    ProjectRecord,
    check_description,
    normalize_name,
    normalize_project_id,
)
from projects_api.repositories import RecordStore

logger = logging.getLogger(__name__)


@contextmanager
def _rejections(procedure: str) -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        logger.info("Rejected %s input: %s", procedure, exc.message)
        raise


class ProjectService:
    """Create, list, fetch, update and delete project records."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def create(self, name: Any, description: Optional[str] = None) -> ProjectRecord:
        with _rejections("create"):
            candidate = ProjectCandidate(name=normalize_name(name), description=check_description(description))
        record = self.store.insert(candidate)
        logger.info("Created project %s", record.id)
        return record

    def get_all(self) -> List[ProjectRecord]:
        return self.store.list_all()

    def get_by_id(self, project_id: Any) -> LookupResult:
        with _rejections("getById"):
            pid = normalize_project_id(project_id)
        record = self.store.find_by_id(pid)
        if record is None:
            logger.debug("Project %s not found", pid)
            return NotFound(pid)
        return Found(record)

    def update(self, project_id: Any, patch: Optional[ProjectPatch] = None) -> ProjectRecord:
        """Apply only the supplied fields of ``patch``.

        ``description=None`` clears the description; omitted fields are kept.
        """
        patch = patch or ProjectPatch()
        with _rejections("update"):
            pid = normalize_project_id(project_id)
            checked = ProjectPatch(
                name=UNSET if patch.name is UNSET else normalize_name(patch.name),
                description=UNSET if patch.description is UNSET else check_description(patch.description),
            )
        record = self.store.update_by_id(pid, checked)
        if record is None:
            raise NotFoundError(pid)
        logger.info("Updated project %s (%s)", pid, ", ".join(sorted(checked.changes())) or "no changes")
        return record

    def delete(self, project_id: Any) -> DeleteAck:
        with _rejections("delete"):
            pid = normalize_project_id(project_id)
        if not self.store.delete_by_id(pid):
            raise NotFoundError(pid)
        logger.info("Deleted project %s", pid)
        return DeleteAck(success=True)
