"""Thread-safe in-process RecordStore."""
from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from projects_api.domain.projects import ProjectCandidate, ProjectPatch, ProjectRecord


class InMemoryRepository:
    """Keeps records in a dict keyed by random uuid4 ids."""

    def __init__(self) -> None:
        self._records: Dict[str, ProjectRecord] = {}
        self._lock = threading.Lock()

    def _new_id(self) -> str:
        candidate = uuid.uuid4().hex
        while candidate in self._records:
            candidate = uuid.uuid4().hex
        return candidate

    def insert(self, candidate: ProjectCandidate) -> ProjectRecord:
        now = datetime.now(timezone.utc)
        with self._lock:
            record = ProjectRecord(
                id=self._new_id(),
                name=candidate.name,
                description=candidate.description,
                created_at=now,
                updated_at=now,
            )
            self._records[record.id] = record
            return record

    def list_all(self) -> List[ProjectRecord]:
        with self._lock:
            return list(self._records.values())

    def find_by_id(self, project_id: str) -> Optional[ProjectRecord]:
        with self._lock:
            return self._records.get(project_id)

    def update_by_id(self, project_id: str, patch: ProjectPatch) -> Optional[ProjectRecord]:
        with self._lock:
            current = self._records.get(project_id)
            if current is None:
                return None
            changes = patch.changes()
            if not changes:
                return current
            updated = replace(current, updated_at=datetime.now(timezone.utc), **changes)
            self._records[project_id] = updated
            return updated

    def delete_by_id(self, project_id: str) -> bool:
        with self._lock:
            return self._records.pop(project_id, None) is not None
