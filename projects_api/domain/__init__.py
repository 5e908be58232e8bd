"""Domain types, input rules and failure taxonomy for projects."""

from .errors import NotFoundError, ProjectError, StoreError, ValidationError
from .projects import (
    UNSET,
    DeleteAck,
    Found,
    LookupResult,
    NotFound,
    ProjectCandidate,
    ProjectPatch,
    ProjectRecord,
)

__all__ = [
    "UNSET",
    "DeleteAck",
    "Found",
    "LookupResult",
    "NotFound",
    "NotFoundError",
    "ProjectCandidate",
    "ProjectError",
    "ProjectPatch",
    "ProjectRecord",
    "StoreError",
    "ValidationError",
]
