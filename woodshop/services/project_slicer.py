"""
Project Slicer — turns a woodworking project into ordered lesson slices.

A project that ships its own lesson slices gets them normalized and used
verbatim. Otherwise four stages are generated (planning, cutting, assembly,
finishing), each taking the subset of the plan's materials and tools whose
classification tags match the stage.
"""
from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .classifier import MaterialKind, ToolKind, classify_material, classify_tool

SLICE_TYPES = ("planning", "cutting", "assembly", "finishing", "safety")
DEFAULT_SLICE_DURATION = 30
PLANNING_ITEM_COUNT = 3


class SliceStateError(RuntimeError):
    """Raised when a completed slice is edited or completed again."""


@dataclass
class ProjectDescription:
    id: str
    title: str
    description: str = ""
    difficulty: str = "Beginner"
    category: str = "general"
    estimated_time: str = ""
    materials: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    lesson_slices: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "category": self.category,
            "estimated_time": self.estimated_time,
            "materials": list(self.materials),
            "tools": list(self.tools),
            "skills": list(self.skills),
            "lesson_slices": [dict(s) for s in self.lesson_slices],
        }


@dataclass
class ToolItem:
    id: str
    name: str
    kinds: frozenset[ToolKind] = frozenset()
    required: bool = True


@dataclass
class MaterialItem:
    id: str
    name: str
    kinds: frozenset[MaterialKind] = frozenset()
    quantity: int = 1
    unit: str = "piece"


@dataclass
class ProjectPlan:
    id: str
    project_id: str
    title: str
    description: str
    difficulty: str
    category: str
    estimated_time: str
    materials: list[MaterialItem] = field(default_factory=list)
    tools: list[ToolItem] = field(default_factory=list)
    lesson_slices: list[dict] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def materials_of(self, *kinds: MaterialKind) -> list[str]:
        wanted = set(kinds)
        return [m.name for m in self.materials if m.kinds & wanted]

    def tools_of(self, *kinds: ToolKind) -> list[str]:
        wanted = set(kinds)
        return [t.name for t in self.tools if t.kinds & wanted]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "category": self.category,
            "estimated_time": self.estimated_time,
            "materials": [
                {"id": m.id, "name": m.name, "kinds": sorted(k.value for k in m.kinds),
                 "quantity": m.quantity, "unit": m.unit}
                for m in self.materials
            ],
            "tools": [
                {"id": t.id, "name": t.name, "kinds": sorted(k.value for k in t.kinds),
                 "required": t.required}
                for t in self.tools
            ],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class ProjectSlice:
    id: str
    title: str
    description: str
    type: str
    duration: int
    steps: list[str] = field(default_factory=list)
    success_criteria: list[str] = field(default_factory=list)
    photo_check_required: bool = False
    materials: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    order: int = 1
    project_id: str = ""
    is_completed: bool = False
    completed_photos: list[str] = field(default_factory=list)
    notes: str = ""

    # ------------------------------------------------------------------ #
    # Editing                                                              #
    # ------------------------------------------------------------------ #

    def _check_editable(self) -> None:
        if self.is_completed:
            raise SliceStateError(f"Slice '{self.id}' is completed and can no longer change")

    def add_step(self, text: str) -> None:
        self._check_editable()
        text = text.strip()
        if text:
            self.steps.append(text)

    def remove_step(self, index: int) -> str:
        self._check_editable()
        if not 0 <= index < len(self.steps):
            raise IndexError(f"Step index {index} out of range")
        return self.steps.pop(index)

    def add_success_criterion(self, text: str) -> None:
        self._check_editable()
        text = text.strip()
        if text:
            self.success_criteria.append(text)

    def remove_success_criterion(self, index: int) -> str:
        self._check_editable()
        if not 0 <= index < len(self.success_criteria):
            raise IndexError(f"Success criterion index {index} out of range")
        return self.success_criteria.pop(index)

    def toggle_photo_check(self) -> bool:
        self._check_editable()
        self.photo_check_required = not self.photo_check_required
        return self.photo_check_required

    def update(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> None:
        self._check_editable()
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if duration is not None:
            if duration < 0:
                raise ValueError("Duration cannot be negative")
            self.duration = duration

    def complete(self, photos: Optional[list[str]] = None, notes: Optional[str] = None) -> None:
        """One-way transition to Completed."""
        self._check_editable()
        self.is_completed = True
        if photos:
            self.completed_photos = list(photos)
        if notes:
            self.notes = notes

    # ------------------------------------------------------------------ #
    # Serialization                                                        #
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "duration": self.duration,
            "steps": list(self.steps),
            "success_criteria": list(self.success_criteria),
            "photo_check_required": self.photo_check_required,
            "materials": list(self.materials),
            "tools": list(self.tools),
            "order": self.order,
            "is_completed": self.is_completed,
            "completed_photos": list(self.completed_photos),
            "notes": self.notes,
        }


# ---------------------------------------------------------------------- #
# Plan creation                                                            #
# ---------------------------------------------------------------------- #

def create_project_plan(project: ProjectDescription) -> ProjectPlan:
    """Tag the project's tools and materials and wrap them in a plan."""
    return ProjectPlan(
        id=f"plan-{project.id}-{int(time.time() * 1000)}",
        project_id=project.id,
        title=project.title,
        description=project.description,
        difficulty=project.difficulty,
        category=project.category,
        estimated_time=project.estimated_time,
        materials=[
            MaterialItem(id=f"mat-{i}", name=name, kinds=classify_material(name))
            for i, name in enumerate(project.materials)
        ],
        tools=[
            ToolItem(id=f"tool-{i}", name=name, kinds=classify_tool(name))
            for i, name in enumerate(project.tools)
        ],
        lesson_slices=[dict(s) for s in project.lesson_slices],
    )


def slice_project_into_lessons(plan: ProjectPlan) -> list[ProjectSlice]:
    if plan.lesson_slices:
        slices = normalize_slices(plan.lesson_slices)
    else:
        slices = generate_default_slices(plan)
    for s in slices:
        s.project_id = plan.project_id
    return slices


def slice_project(project: Optional[ProjectDescription]) -> list[ProjectSlice]:
    if project is None:
        return []
    return slice_project_into_lessons(create_project_plan(project))


# ---------------------------------------------------------------------- #
# Default four-stage template                                              #
# ---------------------------------------------------------------------- #

def generate_default_slices(plan: ProjectPlan) -> list[ProjectSlice]:
    return [
        ProjectSlice(
            id="slice-1",
            title="Project Planning & Setup",
            description="Plan your workspace and gather all materials and tools",
            type="planning",
            duration=30,
            steps=[
                "Review project requirements",
                "Gather all materials",
                "Prepare your workspace",
                "Check all tools are ready",
            ],
            success_criteria=[
                "All materials are gathered",
                "Workspace is clean and organized",
                "Safety equipment is ready",
            ],
            photo_check_required=True,
            materials=[m.name for m in plan.materials[:PLANNING_ITEM_COUNT]],
            tools=[t.name for t in plan.tools[:PLANNING_ITEM_COUNT]],
            order=1,
        ),
        ProjectSlice(
            id="slice-2",
            title="Material Preparation",
            description="Cut and prepare all wood pieces to size",
            type="cutting",
            duration=60,
            steps=[
                "Measure and mark wood pieces",
                "Cut pieces to required dimensions",
                "Sand edges smooth",
                "Label pieces for assembly",
            ],
            success_criteria=[
                "All pieces are cut to size",
                "Edges are sanded smooth",
                "Pieces are properly labeled",
            ],
            photo_check_required=True,
            materials=[m.name for m in plan.materials],
            tools=plan.tools_of(ToolKind.SAW, ToolKind.SANDING, ToolKind.MEASURING),
            order=2,
        ),
        ProjectSlice(
            id="slice-3",
            title="Assembly & Joinery",
            description="Assemble the project using appropriate joinery techniques",
            type="assembly",
            duration=90,
            steps=[
                "Dry fit all pieces",
                "Apply glue or fasteners",
                "Clamp pieces together",
                "Check alignment and squareness",
            ],
            success_criteria=[
                "All pieces are properly joined",
                "Project is square and aligned",
                "Joints are secure and clean",
            ],
            photo_check_required=True,
            materials=plan.materials_of(MaterialKind.ADHESIVE, MaterialKind.FASTENER),
            tools=plan.tools_of(ToolKind.CLAMP, ToolKind.DRILL, ToolKind.HAMMER),
            order=3,
        ),
        ProjectSlice(
            id="slice-4",
            title="Finishing & Details",
            description="Apply finish and add final details",
            type="finishing",
            duration=60,
            steps=[
                "Sand all surfaces smooth",
                "Apply stain or finish",
                "Add final details and hardware",
                "Quality check the final result",
            ],
            success_criteria=[
                "All surfaces are smooth",
                "Finish is applied evenly",
                "Project meets quality standards",
            ],
            photo_check_required=True,
            materials=plan.materials_of(MaterialKind.FINISH, MaterialKind.ABRASIVE),
            tools=plan.tools_of(ToolKind.BRUSH, ToolKind.SANDING),
            order=4,
        ),
    ]


# ---------------------------------------------------------------------- #
# Normalization of externally-authored slices                              #
# ---------------------------------------------------------------------- #

_DURATION_RE = re.compile(
    r"(\d+(?:\.\d+)?)(?!\d)\s*(hours?|hrs?|h|minutes?|mins?|m)?(?![a-z])",
    re.IGNORECASE,
)


def parse_duration(value) -> int:
    """Minutes from an int, a float, or text like '15 min', '1.5 hours' or '1h30m'.

    Every number/unit pair in the text is added up; a number without a unit
    counts as minutes.
    """
    if value is None or value == "":
        return DEFAULT_SLICE_DURATION
    if isinstance(value, bool):
        raise TypeError("Duration must be a number or text")
    if isinstance(value, (int, float)):
        return max(0, int(round(value)))
    total = 0.0
    found = False
    for match in _DURATION_RE.finditer(str(value)):
        found = True
        amount = float(match.group(1))
        unit = (match.group(2) or "min").lower()
        if unit.startswith("h"):
            amount *= 60
        total += amount
    if not found:
        return DEFAULT_SLICE_DURATION
    return int(round(total))


def _pick(raw: dict, *keys, default=None):
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return default


def normalize_slice(raw: dict, index: int) -> ProjectSlice:
    """Fill missing optional fields; `index` is the 0-based position."""
    slice_type = _pick(raw, "type", default="planning")
    if slice_type not in SLICE_TYPES:
        slice_type = "planning"
    return ProjectSlice(
        id=_pick(raw, "id") or f"slice-{index + 1}",
        title=_pick(raw, "title") or f"Step {index + 1}",
        description=_pick(raw, "description", default=""),
        type=slice_type,
        duration=parse_duration(_pick(raw, "duration")),
        steps=list(_pick(raw, "steps", default=[])),
        success_criteria=list(_pick(raw, "successCriteria", "success_criteria", default=[])),
        photo_check_required=bool(_pick(raw, "photoCheckRequired", "photo_check_required",
                                        default=False)),
        materials=[_item_name(m) for m in _pick(raw, "materials", default=[])],
        tools=[_item_name(t) for t in _pick(raw, "tools", default=[])],
        order=index + 1,
        project_id=_pick(raw, "projectId", "project_id", default=""),
        is_completed=bool(_pick(raw, "isCompleted", "is_completed", default=False)),
        completed_photos=list(_pick(raw, "completedPhotos", "completed_photos", default=[])),
        notes=_pick(raw, "notes", default=""),
    )


def normalize_slices(raw_slices: list[dict]) -> list[ProjectSlice]:
    return [normalize_slice(raw, i) for i, raw in enumerate(raw_slices)]


def _item_name(item) -> str:
    # Stored slices may carry full material/tool records instead of names.
    if isinstance(item, dict):
        return str(item.get("name", ""))
    return str(item)
