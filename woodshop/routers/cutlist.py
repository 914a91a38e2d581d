"""POST /api/cutlist/optimize — assign required cuts to stock lengths."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from ..models.requests import OptimizeRequest
from ..services import cut_optimizer

router = APIRouter(prefix="/api/cutlist")
logger = logging.getLogger(__name__)


def run_optimizer(
    req: OptimizeRequest,
) -> tuple[cut_optimizer.OptimizationResult, list[cut_optimizer.StockLength]]:
    """Shared by the optimize and export routes; maps validation errors to 422."""
    cuts = [cut_optimizer.CutPiece.from_dict(c.model_dump()) for c in req.cuts]
    if req.stock is None:
        stock = cut_optimizer.default_stock()
    else:
        stock = [cut_optimizer.StockLength.from_dict(s.model_dump()) for s in req.stock]
    kerf = cut_optimizer.DEFAULT_KERF_IN if req.kerf_in is None else req.kerf_in

    try:
        result = cut_optimizer.optimize(cuts, stock, kerf_in=kerf)
    except cut_optimizer.CutListValidationError as e:
        logger.warning(f"Rejected cut list: {e.errors}")
        raise HTTPException(status_code=422, detail=e.errors)
    return result, stock


@router.get("/stock-defaults")
async def stock_defaults() -> dict[str, Any]:
    return {
        "stock": [s.to_dict() for s in cut_optimizer.default_stock()],
        "kerf_in": cut_optimizer.DEFAULT_KERF_IN,
    }


@router.post("/optimize")
async def optimize_cut_list(req: OptimizeRequest) -> dict[str, Any]:
    """
    Best-fit the requested cuts onto the given (or default) stock.
    Pieces no board can hold are returned under "unassigned".
    """
    result, _ = run_optimizer(req)
    return result.to_dict()
