"""POST /api/export — download an optimized cut list as text, CSV, or SVG."""
from __future__ import annotations

import csv
import io
import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from ..models.requests import OptimizeRequest
from ..services import cut_report, svg_renderer
from .cutlist import run_optimizer

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/export/report")
async def export_report(req: OptimizeRequest) -> PlainTextResponse:
    result, stock = run_optimizer(req)
    text = "\n".join(cut_report.format_cut_report(result, stock)) + "\n"
    return PlainTextResponse(
        content=text,
        headers={"Content-Disposition": 'attachment; filename="cut-list-report.txt"'},
    )


@router.post("/export/csv")
async def export_csv(req: OptimizeRequest) -> StreamingResponse:
    result, _ = run_optimizer(req)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(cut_report.CSV_HEADER)
    writer.writerows(cut_report.cut_rows(result))

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="cut-list.csv"'},
    )


@router.post("/export/svg")
async def export_svg(req: OptimizeRequest) -> Response:
    result, _ = run_optimizer(req)
    svg = svg_renderer.render_cut_layout_svg(result)
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="cut-layout.svg"'},
    )
