"""Failure taxonomy shared by the project service and its stores."""
from __future__ import annotations


class ProjectError(Exception):
    """Base class for project failures.

    ``code`` and ``status_code`` are stable signals for the transport layer.
    """

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProjectError):
    """Malformed or missing input. Never retried automatically."""

    code = "BAD_REQUEST"
    status_code = 400


class NotFoundError(ProjectError):
    """The referenced project does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, project_id: str):
        super().__init__(f"Projeto {project_id} nao encontrado")
        self.project_id = project_id


class StoreError(ProjectError):
    """Persistence fault (storage unavailable, disk/network issues)."""

    code = "SERVICE_UNAVAILABLE"
    status_code = 503
