from pydantic import BaseModel, Field
from typing import Optional
from .cutlist import CutPieceSchema, StockLengthSchema


class OptimizeRequest(BaseModel):
    cuts: list[CutPieceSchema]
    stock: Optional[list[StockLengthSchema]] = None
    kerf_in: Optional[float] = Field(default=None, le=1.0)
