"""/api/projects — project lookup, lesson slicing, slice editing and completion."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_progress_store, get_repository
from ..models.project import CompleteSliceRequest, SliceUpdateRequest, StepRequest
from ..services.progress_store import ProgressStore, ProjectProgress
from ..services.project_repository import ProjectRepository
from ..services.project_slicer import ProjectSlice, SliceStateError

router = APIRouter(prefix="/api/projects")
logger = logging.getLogger(__name__)


def _progress_or_404(store: ProgressStore, project_id: str) -> ProjectProgress:
    progress = store.get(project_id)
    if progress is None:
        raise HTTPException(status_code=404, detail=f"Project '{project_id}' has not been sliced")
    return progress


def _slice_or_404(store: ProgressStore, project_id: str, slice_id: str) -> ProjectSlice:
    target = _progress_or_404(store, project_id).find_slice(slice_id)
    if target is None:
        raise HTTPException(status_code=404, detail=f"Slice '{slice_id}' not found")
    return target


def _edit(target: ProjectSlice, action, *args) -> Any:
    try:
        return action(*args)
    except SliceStateError as e:
        logger.warning(f"Rejected edit on slice {target.id}: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("")
async def list_projects(
    category: Optional[str] = None,
    repository: ProjectRepository = Depends(get_repository),
) -> dict[str, Any]:
    projects = await repository.list_projects(category)
    return {"projects": [p.to_dict() for p in projects]}


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    repository: ProjectRepository = Depends(get_repository),
) -> dict[str, Any]:
    project = await repository.get_project_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project.to_dict()


@router.post("/{project_id}/slices")
async def slice_project(
    project_id: str,
    repository: ProjectRepository = Depends(get_repository),
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    """
    Plan the project and break it into lesson slices.

    Projects with their own lesson slices keep them (normalized); otherwise
    the four-stage template is generated. Any earlier progress is replaced.
    """
    project = await repository.get_project_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")

    progress = store.start_project(project)
    await repository.update_project_progress(project_id, progress.slices)
    return progress.to_dict()


@router.get("/{project_id}/slices")
async def get_slices(
    project_id: str,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    return _progress_or_404(store, project_id).to_dict()


@router.patch("/{project_id}/slices/{slice_id}")
async def update_slice(
    project_id: str,
    slice_id: str,
    req: SliceUpdateRequest,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.update, req.title, req.description, req.duration)
    return target.to_dict()


@router.post("/{project_id}/slices/{slice_id}/steps")
async def add_step(
    project_id: str,
    slice_id: str,
    req: StepRequest,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.add_step, req.text)
    return target.to_dict()


@router.delete("/{project_id}/slices/{slice_id}/steps/{index}")
async def remove_step(
    project_id: str,
    slice_id: str,
    index: int,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.remove_step, index)
    return target.to_dict()


@router.post("/{project_id}/slices/{slice_id}/criteria")
async def add_success_criterion(
    project_id: str,
    slice_id: str,
    req: StepRequest,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.add_success_criterion, req.text)
    return target.to_dict()


@router.delete("/{project_id}/slices/{slice_id}/criteria/{index}")
async def remove_success_criterion(
    project_id: str,
    slice_id: str,
    index: int,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.remove_success_criterion, index)
    return target.to_dict()


@router.post("/{project_id}/slices/{slice_id}/photo-check")
async def toggle_photo_check(
    project_id: str,
    slice_id: str,
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    _edit(target, target.toggle_photo_check)
    return target.to_dict()


@router.post("/{project_id}/slices/{slice_id}/complete")
async def complete_slice(
    project_id: str,
    slice_id: str,
    req: CompleteSliceRequest,
    repository: ProjectRepository = Depends(get_repository),
    store: ProgressStore = Depends(get_progress_store),
) -> dict[str, Any]:
    target = _slice_or_404(store, project_id, slice_id)
    project_complete = _edit(
        target, store.complete_lesson_slice, project_id, slice_id, req.photos, req.notes
    )
    progress = _progress_or_404(store, project_id)
    await repository.update_project_progress(project_id, progress.slices)
    return {
        "slice": target.to_dict(),
        "project_complete": project_complete,
        "next_slice_id": progress.next_slice().id if progress.next_slice() else None,
    }
