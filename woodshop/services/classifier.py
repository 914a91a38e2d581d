"""
Classifier — tags tool and material names with the kinds the slicer needs.

Names are classified once, when a ProjectPlan is created, so lesson slices
filter on tags instead of substring checks. Patterns are word-bounded:
"Jigsaw" is a saw, "Sawdust collector" is not.
"""
from __future__ import annotations

import re
from enum import Enum


class ToolKind(str, Enum):
    SAW = "saw"
    SANDING = "sanding"
    MEASURING = "measuring"
    CLAMP = "clamp"
    DRILL = "drill"
    HAMMER = "hammer"
    BRUSH = "brush"


class MaterialKind(str, Enum):
    ADHESIVE = "adhesive"
    FASTENER = "fastener"
    FINISH = "finish"
    ABRASIVE = "abrasive"


_TOOL_PATTERNS: list[tuple[ToolKind, re.Pattern]] = [
    (ToolKind.SAW, re.compile(r"saws?\b")),
    (ToolKind.SANDING, re.compile(r"\bsand(er|ers|ing|paper)\b")),
    (ToolKind.MEASURING, re.compile(r"\bmeasur")),
    (ToolKind.CLAMP, re.compile(r"\bclamps?\b")),
    (ToolKind.DRILL, re.compile(r"\bdrill")),
    (ToolKind.HAMMER, re.compile(r"\bhammers?\b")),
    (ToolKind.BRUSH, re.compile(r"brush")),
]

_MATERIAL_PATTERNS: list[tuple[MaterialKind, re.Pattern]] = [
    (MaterialKind.ADHESIVE, re.compile(r"\bglue\b")),
    (MaterialKind.FASTENER, re.compile(r"\b(screw|nail)s?\b")),
    (MaterialKind.FINISH, re.compile(r"\b(stains?|finish(es)?)\b")),
    (MaterialKind.ABRASIVE, re.compile(r"\bsandpaper\b")),
]


def classify_tool(name: str) -> frozenset[ToolKind]:
    text = name.lower()
    return frozenset(kind for kind, pattern in _TOOL_PATTERNS if pattern.search(text))


def classify_material(name: str) -> frozenset[MaterialKind]:
    text = name.lower()
    return frozenset(kind for kind, pattern in _MATERIAL_PATTERNS if pattern.search(text))
