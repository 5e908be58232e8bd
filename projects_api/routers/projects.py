"""
Project procedures exposed over HTTP, tRPC style.

Queries are GET requests and mutations are POST requests with a JSON body.
Successful calls answer ``{"result": {"data": ...}}``; failures answer
``{"error": {"code": ..., "message": ...}}`` with the status code carried by
the ProjectError subclass.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from projects_api.domain.errors import ProjectError, ValidationError
from projects_api.domain.projects import UNSET, Found, ProjectPatch
from projects_api.services.project_service import ProjectService

router = APIRouter(prefix="/trpc", tags=["project"])


class CreateProjectInput(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class UpdateProjectInput(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    def to_patch(self) -> ProjectPatch:
        supplied = self.model_fields_set
        return ProjectPatch(
            name=self.name if "name" in supplied and self.name is not None else UNSET,
            description=self.description if "description" in supplied else UNSET,
        )


class ProjectIdInput(BaseModel):
    id: Optional[str] = None


def _get_project_service(request: Request) -> ProjectService:
    svc = getattr(getattr(request.app, "state", None), "project_service", None)
    if not svc:
        raise RuntimeError("ProjectService nao configurado")
    return svc


def _ok(data: Any) -> dict:
    return {"result": {"data": data}}


def error_response(err: ProjectError) -> JSONResponse:
    return JSONResponse(
        {"error": {"code": err.code, "message": err.message}},
        status_code=err.status_code,
    )


async def project_error_handler(request: Request, exc: ProjectError) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body')}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return error_response(ValidationError(details or "Entrada invalida"))


@router.post("/project.create")
def create(payload: CreateProjectInput, request: Request):
    record = _get_project_service(request).create(payload.name, payload.description)
    return _ok(record.to_dict())


@router.get("/project.getAll")
def get_all(request: Request):
    records = _get_project_service(request).get_all()
    return _ok([record.to_dict() for record in records])


@router.get("/project.getById")
def get_by_id(request: Request, id: str = ""):
    result = _get_project_service(request).get_by_id(id)
    return _ok(result.record.to_dict() if isinstance(result, Found) else None)


@router.post("/project.update")
def update(payload: UpdateProjectInput, request: Request):
    record = _get_project_service(request).update(payload.id, payload.to_patch())
    return _ok(record.to_dict())


@router.post("/project.delete")
def delete(payload: ProjectIdInput, request: Request):
    ack = _get_project_service(request).delete(payload.id)
    return _ok({"success": ack.success})
