"""Sample woodworking projects the repository is seeded with."""
from __future__ import annotations

from .project_slicer import ProjectDescription

SAMPLE_PROJECTS: list[ProjectDescription] = [
    ProjectDescription(
        id="cutting-board",
        title="Simple Cutting Board",
        description="A beautiful and functional cutting board perfect for beginners",
        difficulty="Beginner",
        category="kitchen",
        estimated_time="2-3 hours",
        materials=["Hardwood (maple, walnut)", "Food-safe oil", "Sandpaper"],
        tools=["Hand saw", "Chisel", "Sandpaper", "Clamps"],
        skills=["safety-basics", "measuring-marking", "hand-sawing", "sanding-finishing"],
        lesson_slices=[
            {
                "id": "cb-planning",
                "title": "Planning & Design",
                "description": "Plan your cutting board dimensions and design",
                "duration": "15 min",
                "type": "planning",
                "steps": [
                    "Choose wood species",
                    "Determine dimensions",
                    "Sketch design",
                    "Calculate materials needed",
                ],
                "successCriteria": ["Design sketched", "Materials calculated",
                                    "Dimensions finalized"],
                "photoCheckRequired": False,
            },
            {
                "id": "cb-cutting",
                "title": "Cutting & Shaping",
                "description": "Cut wood to size and shape the board",
                "duration": "45 min",
                "type": "cutting",
                "steps": [
                    "Mark cutting lines",
                    "Cut to rough size",
                    "Shape edges",
                    "Check dimensions",
                ],
                "successCriteria": ["Board cut to size", "Edges shaped", "Dimensions accurate"],
                "photoCheckRequired": True,
            },
            {
                "id": "cb-sanding",
                "title": "Sanding & Finishing",
                "description": "Sand surfaces and apply food-safe finish",
                "duration": "30 min",
                "type": "finishing",
                "steps": [
                    "Start with coarse sandpaper",
                    "Progress to fine grit",
                    "Apply food-safe oil",
                    "Let dry completely",
                ],
                "successCriteria": ["Surfaces smooth", "Oil applied evenly", "No rough spots"],
                "photoCheckRequired": True,
            },
        ],
    ),
    ProjectDescription(
        id="bookshelf",
        title="Floating Bookshelf",
        description="A minimalist bookshelf that appears to float on the wall",
        difficulty="Beginner",
        category="furniture",
        estimated_time="4-6 hours",
        materials=["Pine boards", "Wall brackets", "Screws", "Paint"],
        tools=["Circular saw", "Drill", "Level", "Paintbrush"],
        skills=["measuring-marking", "basic-joinery", "sanding-finishing"],
    ),
    ProjectDescription(
        id="coffee-table",
        title="Modern Coffee Table",
        description="A sleek coffee table with clean lines and hidden storage",
        difficulty="Intermediate",
        category="furniture",
        estimated_time="8-12 hours",
        materials=["Oak hardwood", "Plywood", "Wood glue", "Finish"],
        tools=["Table saw", "Router", "Clamps", "Sander"],
        skills=["advanced-joinery", "power-tools-intro", "sanding-finishing"],
    ),
    ProjectDescription(
        id="garden-bench",
        title="Garden Bench",
        description="A sturdy bench perfect for your garden or patio",
        difficulty="Intermediate",
        category="outdoor",
        estimated_time="10-14 hours",
        materials=["Cedar or pressure-treated lumber", "Screws", "Finish"],
        tools=["Circular saw", "Drill", "Clamps", "Sander"],
        skills=["power-tools-intro", "basic-joinery", "sanding-finishing"],
    ),
    ProjectDescription(
        id="wooden-sign",
        title="Personalized Wooden Sign",
        description="Create a custom sign with your favorite quote or family name",
        difficulty="Beginner",
        category="decorative",
        estimated_time="2-3 hours",
        materials=["Pine board", "Stain", "Paint", "Hanging hardware"],
        tools=["Jigsaw", "Sander", "Paintbrushes", "Drill"],
        skills=["measuring-marking", "hand-sawing", "sanding-finishing"],
    ),
    ProjectDescription(
        id="dining-chair",
        title="Rustic Dining Chair",
        description="A comfortable dining chair with traditional joinery",
        difficulty="Advanced",
        category="furniture",
        estimated_time="12-16 hours",
        materials=["Hardwood", "Wood glue", "Wedges", "Finish"],
        tools=["Chisels", "Mallet", "Clamps", "Hand planes"],
        skills=["advanced-joinery", "chiseling", "sanding-finishing"],
    ),
]
