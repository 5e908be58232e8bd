"""Project data access backed by SQLAlchemy."""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError

from projects_api.db.models import Project
from projects_api.db.session import get_session
from projects_api.domain.errors import StoreError
from projects_api.domain.projects import ProjectCandidate, ProjectPatch, ProjectRecord

logger = logging.getLogger(__name__)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops the offset on DateTime(timezone=True)
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _entity_to_record(entity: Project) -> ProjectRecord:
    return ProjectRecord(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        created_at=_as_utc(entity.created_at),
        updated_at=_as_utc(entity.updated_at),
    )


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("SQL store failed to %s", action)
        raise StoreError(f"Falha ao {action}: armazenamento indisponivel") from exc


class SQLRepository:
    """RecordStore implementation wrapping the SQLAlchemy session."""

    def _new_id(self) -> str:
        return uuid.uuid4().hex

    def insert(self, candidate: ProjectCandidate) -> ProjectRecord:
        now = datetime.now(timezone.utc)
        entity = Project(
            id=self._new_id(),
            name=candidate.name,
            description=candidate.description,
            created_at=now,
            updated_at=now,
        )
        with _store_errors("criar projeto"), get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return _entity_to_record(entity)

    def list_all(self) -> List[ProjectRecord]:
        with _store_errors("listar projetos"), get_session() as session:
            stmt = select(Project).order_by(Project.created_at, Project.id)
            return [_entity_to_record(entity) for entity in session.execute(stmt).scalars().all()]

    def find_by_id(self, project_id: str) -> Optional[ProjectRecord]:
        with _store_errors("buscar projeto"), get_session() as session:
            entity = session.get(Project, project_id)
            return _entity_to_record(entity) if entity else None

    def update_by_id(self, project_id: str, patch: ProjectPatch) -> Optional[ProjectRecord]:
        with _store_errors("atualizar projeto"), get_session() as session:
            entity = session.get(Project, project_id)
            if not entity:
                return None
            changes = patch.changes()
            if changes:
                for key, value in changes.items():
                    setattr(entity, key, value)
                entity.updated_at = datetime.now(timezone.utc)
                session.commit()
                session.refresh(entity)
            return _entity_to_record(entity)

    def delete_by_id(self, project_id: str) -> bool:
        with _store_errors("remover projeto"), get_session() as session:
            result = session.execute(delete(Project).where(Project.id == project_id))
            session.commit()
            return bool(result.rowcount)
