from pydantic import BaseModel, Field
from typing import Literal, Optional


# Lengths, quantities and cost are range-checked by cut_optimizer.validate_inputs,
# which reports field-keyed errors (cut_0_length, stock_1_quantity, ...).
class CutPieceSchema(BaseModel):
    id: str
    name: str
    quantity: int = 1
    length_in: float
    width_in: float = Field(default=0.0, ge=0)
    thickness_in: float = Field(default=0.0, ge=0)
    material: str = ""
    grain_direction: Optional[Literal["with", "against", "cross"]] = None
    notes: Optional[str] = None


class StockLengthSchema(BaseModel):
    id: str
    length_in: float
    quantity: int
    cost: float = 0.0
