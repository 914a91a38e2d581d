"""
Project Repository — async lookup of projects and storage of their progress.

Backed by an in-memory copy of the sample catalog. The async surface matches
a remote document store so callers do not change when one is plugged in.
"""
from __future__ import annotations

import copy
import logging
from typing import Optional

from .project_catalog import SAMPLE_PROJECTS
from .project_slicer import ProjectDescription, ProjectSlice

logger = logging.getLogger(__name__)


class ProjectRepository:
    def __init__(self, projects: Optional[list[ProjectDescription]] = None) -> None:
        seed = SAMPLE_PROJECTS if projects is None else projects
        self._projects: dict[str, ProjectDescription] = {
            p.id: copy.deepcopy(p) for p in seed
        }
        self._progress: dict[str, list[dict]] = {}

    async def get_project_by_id(self, project_id: str) -> Optional[ProjectDescription]:
        project = self._projects.get(project_id)
        if project is None:
            logger.info(f"Project not found: {project_id}")
            return None
        return copy.deepcopy(project)

    async def list_projects(self, category: Optional[str] = None) -> list[ProjectDescription]:
        projects = list(self._projects.values())
        if category:
            projects = [p for p in projects if p.category == category]
        return [copy.deepcopy(p) for p in projects]

    async def update_project_progress(self, project_id: str, slices: list[ProjectSlice]) -> None:
        if project_id not in self._projects:
            raise KeyError(f"Project '{project_id}' not found")
        self._progress[project_id] = [s.to_dict() for s in slices]

    async def get_project_progress(self, project_id: str) -> list[dict]:
        return copy.deepcopy(self._progress.get(project_id, []))
