"""
Cut List Optimizer — assigns required cut pieces to stock lengths.

Best-fit decreasing: pieces are expanded to one request per unit, sorted
longest first, and each goes to the in-stock board that leaves the smallest
offcut. One piece is cut per board. Caller-owned pieces and stock are never
mutated; assigned units are copies carrying stock_length_in and waste_in.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# Blade width applied by the HTTP layer when a request omits it (1/8").
DEFAULT_KERF_IN = float(os.environ.get("WOODSHOP_DEFAULT_KERF", "0.125"))


class GrainDirection(str, Enum):
    WITH = "with"
    AGAINST = "against"
    CROSS = "cross"


class CutListValidationError(ValueError):
    """Raised when cut or stock input is malformed. `errors` is field-keyed."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


@dataclass
class CutPiece:
    id: str
    name: str
    length_in: float
    width_in: float = 0.0
    thickness_in: float = 0.0
    quantity: int = 1
    material: str = ""
    grain_direction: Optional[GrainDirection] = None
    notes: Optional[str] = None
    stock_length_in: Optional[float] = None
    waste_in: Optional[float] = None

    def label(self) -> str:
        return f'{self.name}: {self.length_in}" x {self.width_in}" x {self.thickness_in}"'

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "length_in": self.length_in,
            "width_in": self.width_in,
            "thickness_in": self.thickness_in,
            "material": self.material,
            "grain_direction": self.grain_direction.value if self.grain_direction else None,
            "notes": self.notes,
            "stock_length_in": self.stock_length_in,
            "waste_in": self.waste_in,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CutPiece":
        grain = data.get("grain_direction")
        return cls(
            id=data["id"],
            name=data["name"],
            length_in=data["length_in"],
            width_in=data.get("width_in", 0.0),
            thickness_in=data.get("thickness_in", 0.0),
            quantity=data.get("quantity", 1),
            material=data.get("material", ""),
            grain_direction=GrainDirection(grain) if grain else None,
            notes=data.get("notes"),
        )


@dataclass
class StockLength:
    id: str
    length_in: float
    quantity: int
    cost: float = 0.0

    def to_dict(self) -> dict:
        return {"id": self.id, "length_in": self.length_in,
                "quantity": self.quantity, "cost": self.cost}

    @classmethod
    def from_dict(cls, data: dict) -> "StockLength":
        return cls(
            id=data["id"],
            length_in=data["length_in"],
            quantity=data["quantity"],
            cost=data.get("cost", 0.0),
        )


@dataclass
class OptimizedGroup:
    stock_length_in: float
    cuts: list[CutPiece] = field(default_factory=list)
    waste_in: float = 0.0
    efficiency: float = 0.0
    stock_used: int = 0
    remaining_stock: int = 0
    cost: float = 0.0

    @property
    def total_cut_length_in(self) -> float:
        return sum(c.length_in for c in self.cuts)

    def to_dict(self) -> dict:
        return {
            "stock_length_in": self.stock_length_in,
            "cuts": [c.to_dict() for c in self.cuts],
            "waste_in": round(self.waste_in, 4),
            "efficiency": round(self.efficiency, 2),
            "stock_used": self.stock_used,
            "remaining_stock": self.remaining_stock,
            "cost": round(self.cost, 2),
        }


@dataclass
class OptimizationResult:
    groups: list[OptimizedGroup] = field(default_factory=list)
    unassigned: list[CutPiece] = field(default_factory=list)
    kerf_in: float = 0.0

    # ------------------------------------------------------------------ #
    # Summary                                                              #
    # ------------------------------------------------------------------ #

    @property
    def total_waste_in(self) -> float:
        return sum(g.waste_in for g in self.groups)

    @property
    def total_cost(self) -> float:
        return sum(g.cost for g in self.groups)

    @property
    def total_stock_used(self) -> int:
        return sum(g.stock_used for g in self.groups)

    @property
    def average_efficiency(self) -> float:
        if not self.groups:
            return 0.0
        return sum(g.efficiency for g in self.groups) / len(self.groups)

    @property
    def is_complete(self) -> bool:
        return not self.unassigned

    def to_dict(self) -> dict:
        return {
            "groups": [g.to_dict() for g in self.groups],
            "unassigned": [c.to_dict() for c in self.unassigned],
            "kerf_in": self.kerf_in,
            "total_waste_in": round(self.total_waste_in, 4),
            "total_cost": round(self.total_cost, 2),
            "total_stock_used": self.total_stock_used,
            "average_efficiency": round(self.average_efficiency, 2),
        }


def default_stock() -> list[StockLength]:
    """Common dimensional lumber lengths: 8ft, 6ft and 4ft boards."""
    return [
        StockLength(id="1", length_in=96.0, quantity=10, cost=12.99),
        StockLength(id="2", length_in=72.0, quantity=8, cost=9.99),
        StockLength(id="3", length_in=48.0, quantity=12, cost=6.99),
    ]


def validate_inputs(
    cuts: list[CutPiece],
    stock: list[StockLength],
    kerf_in: float = 0.0,
) -> dict[str, str]:
    errors: dict[str, str] = {}

    if kerf_in < 0:
        errors["kerf"] = "Kerf cannot be negative"

    for i, s in enumerate(stock):
        if s.length_in <= 0:
            errors[f"stock_{i}_length"] = "Length must be greater than 0"
        if s.quantity <= 0:
            errors[f"stock_{i}_quantity"] = "Quantity must be greater than 0"
        if s.cost < 0:
            errors[f"stock_{i}_cost"] = "Cost cannot be negative"

    for i, c in enumerate(cuts):
        if c.length_in <= 0:
            errors[f"cut_{i}_length"] = "Cut length must be greater than 0"
        if c.quantity < 1:
            errors[f"cut_{i}_quantity"] = "Quantity must be at least 1"

    return errors


def _fits(stock_length: float, piece_length: float, kerf_in: float) -> bool:
    # A piece exactly the board length needs no saw cut.
    return stock_length == piece_length or stock_length >= piece_length + kerf_in


def _expand(cuts: list[CutPiece]) -> list[CutPiece]:
    return [replace(c, quantity=1) for c in cuts for _ in range(c.quantity)]


def optimize(
    cuts: list[CutPiece],
    stock: list[StockLength],
    kerf_in: float = 0.0,
) -> OptimizationResult:
    """
    Assign every unit of every cut piece to the best-fitting stock board.

    Raises CutListValidationError on non-positive lengths or quantities.
    Units that no remaining board can hold end up in `result.unassigned`.
    """
    errors = validate_inputs(cuts, stock, kerf_in)
    if errors:
        raise CutListValidationError(errors)

    remaining = [s.quantity for s in stock]
    result = OptimizationResult(kerf_in=kerf_in)
    groups: dict[float, OptimizedGroup] = {}

    requests = sorted(_expand(cuts), key=lambda c: c.length_in, reverse=True)

    for unit in requests:
        best_idx: Optional[int] = None
        best_waste = float("inf")
        for idx, s in enumerate(stock):
            if remaining[idx] <= 0 or not _fits(s.length_in, unit.length_in, kerf_in):
                continue
            waste = s.length_in - unit.length_in
            if waste < best_waste:
                best_idx = idx
                best_waste = waste

        if best_idx is None:
            logger.info(f"No stock fits cut '{unit.name}' ({unit.length_in}\")")
            result.unassigned.append(unit)
            continue

        chosen = stock[best_idx]
        remaining[best_idx] -= 1
        unit.stock_length_in = chosen.length_in
        unit.waste_in = best_waste

        group = groups.get(chosen.length_in)
        if group is None:
            group = OptimizedGroup(stock_length_in=chosen.length_in)
            groups[chosen.length_in] = group
            result.groups.append(group)
        group.cuts.append(unit)
        group.waste_in += best_waste
        group.stock_used += 1
        group.cost += chosen.cost

    for group in result.groups:
        group.remaining_stock = sum(
            remaining[i] for i, s in enumerate(stock) if s.length_in == group.stock_length_in
        )
        group.efficiency = group.total_cut_length_in / (group.stock_length_in * group.stock_used) * 100

    logger.info(
        f"Optimized {len(requests)} cuts onto {result.total_stock_used} boards "
        f"({len(result.unassigned)} unassigned, waste {result.total_waste_in:.2f}\")"
    )
    return result
