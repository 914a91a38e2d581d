"""FastAPI dependencies handing out the application's shared services."""
from __future__ import annotations

from fastapi import Request

from .services.progress_store import ProgressStore
from .services.project_repository import ProjectRepository


def get_repository(request: Request) -> ProjectRepository:
    return request.app.state.repository


def get_progress_store(request: Request) -> ProgressStore:
    return request.app.state.progress_store
