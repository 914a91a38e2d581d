"""Woodshop Planner — FastAPI application entry point."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import cutlist, export, projects
from .services.progress_store import ProgressStore
from .services.project_repository import ProjectRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "WOODSHOP_CORS_ORIGINS",
        "http://localhost:8081,http://localhost:19006,http://127.0.0.1:8081",
    ).split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.repository = ProjectRepository()
    app.state.progress_store = ProgressStore()
    projects_loaded = len(await app.state.repository.list_projects())
    logger.info(f"Project repository ready with {projects_loaded} projects")

    yield


app = FastAPI(
    title="Woodshop Planner",
    description="Cut list optimization and lesson slicing for woodworking projects",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS — allow the Expo dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(cutlist.router)
app.include_router(projects.router)
app.include_router(export.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/")
async def root() -> dict:
    return {"message": "Woodshop Planner API", "docs": "/docs"}
