"""
Persistence adapters.

Services depend on the ``RecordStore`` interface below, never on a concrete
backend. ``SQLRepository`` is the durable store; ``InMemoryRepository`` is a
substitutable store for tests and throwaway environments.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from projects_api.domain.projects import ProjectCandidate, ProjectPatch, ProjectRecord


class RecordStore(Protocol):
    def insert(self, candidate: ProjectCandidate) -> ProjectRecord:
        """Assign an id, persist atomically and return the stored form."""
        ...

    def list_all(self) -> List[ProjectRecord]:
        ...

    def find_by_id(self, project_id: str) -> Optional[ProjectRecord]:
        ...

    def update_by_id(self, project_id: str, patch: ProjectPatch) -> Optional[ProjectRecord]:
        """Merge supplied fields; None when no record has ``project_id``."""
        ...

    def delete_by_id(self, project_id: str) -> bool:
        """Remove the record; False when it did not exist."""
        ...


def build_store(backend: str) -> RecordStore:
    """Instantiate the store named by ``STORE_BACKEND``."""
    if backend == "memory":
        from .memory_repository import InMemoryRepository

        return InMemoryRepository()
    from .sql_repository import SQLRepository

    return SQLRepository()
