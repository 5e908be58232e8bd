"""Domain types and input rules for project records."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from .errors import ValidationError

PROJECT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")
NAME_MAX_LENGTH = 255


class _Unset:
    """Marker for a field the caller did not supply."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class ProjectCandidate:
    """Validated input for a new record; the store assigns id and timestamps."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ProjectPatch:
    """Partial update. ``UNSET`` leaves a field alone; ``description=None`` clears it."""

    name: Union[str, _Unset] = field(default=UNSET)
    description: Union[str, None, _Unset] = field(default=UNSET)

    def changes(self) -> dict:
        values = {}
        if self.name is not UNSET:
            values["name"] = self.name
        if self.description is not UNSET:
            values["description"] = self.description
        return values


@dataclass(frozen=True)
class Found:
    record: ProjectRecord


@dataclass(frozen=True)
class NotFound:
    project_id: str


LookupResult = Union[Found, NotFound]


@dataclass(frozen=True)
class DeleteAck:
    success: bool = True


def normalize_project_id(value: Any) -> str:
    """Return the trimmed identifier or raise ValidationError."""
    if not isinstance(value, str):
        raise ValidationError("id deve ser texto")
    candidate = value.strip()
    if not PROJECT_ID_PATTERN.fullmatch(candidate):
        raise ValidationError("id invalido. Use 1-64 caracteres [A-Za-z0-9_-]")
    return candidate


def normalize_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("name e obrigatorio")
    candidate = value.strip()
    if not candidate:
        raise ValidationError("name nao pode ser vazio")
    if len(candidate) > NAME_MAX_LENGTH:
        raise ValidationError(f"name excede {NAME_MAX_LENGTH} caracteres")
    return candidate


def check_description(value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError("description deve ser texto")
    return value
