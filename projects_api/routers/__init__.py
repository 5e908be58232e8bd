"""
FastAPI routers grouped by resource.

Each module inside this package exposes an APIRouter that is included in the
application built by ``projects_api.app.create_app``.
"""
