"""
Progress Store — per-project lesson progress held in an explicit object.

One ProgressStore is created by the application and handed to whoever needs
it; there is no module-level instance.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .project_slicer import (
    ProjectDescription,
    ProjectPlan,
    ProjectSlice,
    create_project_plan,
    slice_project_into_lessons,
)

logger = logging.getLogger(__name__)


@dataclass
class ProjectProgress:
    plan: ProjectPlan
    slices: list[ProjectSlice] = field(default_factory=list)

    def find_slice(self, slice_id: str) -> Optional[ProjectSlice]:
        for s in self.slices:
            if s.id == slice_id:
                return s
        return None

    def completed_count(self) -> int:
        return sum(1 for s in self.slices if s.is_completed)

    @property
    def is_complete(self) -> bool:
        return bool(self.slices) and all(s.is_completed for s in self.slices)

    def next_slice(self) -> Optional[ProjectSlice]:
        for s in sorted(self.slices, key=lambda s: s.order):
            if not s.is_completed:
                return s
        return None

    def to_dict(self) -> dict:
        return {
            "plan": self.plan.to_dict(),
            "slices": [s.to_dict() for s in self.slices],
            "completed": self.completed_count(),
            "total": len(self.slices),
            "is_complete": self.is_complete,
        }


class ProgressStore:
    def __init__(self) -> None:
        self._progress: dict[str, ProjectProgress] = {}

    def create_project_plan(self, project: ProjectDescription) -> ProjectPlan:
        return create_project_plan(project)

    def slice_project_into_lessons(self, plan: ProjectPlan) -> list[ProjectSlice]:
        slices = slice_project_into_lessons(plan)
        self._progress[plan.project_id] = ProjectProgress(plan=plan, slices=slices)
        return slices

    def start_project(self, project: ProjectDescription) -> ProjectProgress:
        """Plan and slice a project, replacing any earlier progress for it."""
        plan = self.create_project_plan(project)
        self.slice_project_into_lessons(plan)
        logger.info(f"Started project {project.id} with {len(self._progress[project.id].slices)} slices")
        return self._progress[project.id]

    def get(self, project_id: str) -> Optional[ProjectProgress]:
        return self._progress.get(project_id)

    def complete_lesson_slice(
        self,
        project_id: str,
        slice_id: str,
        photos: Optional[list[str]] = None,
        notes: Optional[str] = None,
    ) -> bool:
        """
        Mark a slice completed. Returns True once every slice of the project
        is completed. Raises KeyError for an unknown project or slice.
        """
        progress = self._progress.get(project_id)
        if progress is None:
            raise KeyError(f"Project '{project_id}' has not been started")
        target = progress.find_slice(slice_id)
        if target is None:
            raise KeyError(f"Slice '{slice_id}' not found in project '{project_id}'")

        target.complete(photos=photos, notes=notes)
        progress.plan.updated_at = datetime.now(timezone.utc)
        if progress.is_complete:
            logger.info(f"Project {project_id} completed")
        return progress.is_complete

    def reset(self, project_id: str) -> None:
        self._progress.pop(project_id, None)
