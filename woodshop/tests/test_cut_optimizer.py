"""Unit tests for cut_optimizer.py — best-fit assignment of cuts to stock."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import pytest

from woodshop.services.cut_optimizer import (
    CutPiece,
    StockLength,
    OptimizationResult,
    CutListValidationError,
    GrainDirection,
    default_stock,
    optimize,
    validate_inputs,
)


def _cut(id: str, length: float, qty: int = 1, name: str | None = None) -> CutPiece:
    return CutPiece(id=id, name=name or f"Piece {id}", length_in=length,
                    width_in=3.5, thickness_in=0.75, quantity=qty, material="Pine")


def _bookcase_cuts() -> list[CutPiece]:
    return [
        _cut("side", 72.0, qty=2, name="Side"),
        _cut("shelf", 34.25, qty=5, name="Shelf"),
        _cut("top", 36.0, qty=1, name="Top"),
        _cut("kick", 34.25, qty=1, name="Kick"),
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Tests: worked example
# ─────────────────────────────────────────────────────────────────────────────

class TestWorkedExample:
    def _run(self) -> OptimizationResult:
        cuts = [_cut("a", 40.0), _cut("b", 30.0)]
        stock = [
            StockLength(id="s96", length_in=96.0, quantity=1, cost=10.0),
            StockLength(id="s48", length_in=48.0, quantity=1, cost=5.0),
        ]
        return optimize(cuts, stock)

    def test_longest_piece_best_fits_shorter_board(self):
        result = self._run()
        by_length = {g.stock_length_in: g for g in result.groups}
        assert [c.id for c in by_length[48.0].cuts] == ["a"]
        assert by_length[48.0].waste_in == 8.0

    def test_second_piece_takes_remaining_board(self):
        result = self._run()
        by_length = {g.stock_length_in: g for g in result.groups}
        assert [c.id for c in by_length[96.0].cuts] == ["b"]
        assert by_length[96.0].waste_in == 66.0

    def test_total_waste(self):
        assert self._run().total_waste_in == 74.0

    def test_total_cost_counts_consumed_boards(self):
        assert self._run().total_cost == pytest.approx(15.0)

    def test_groups_in_creation_order(self):
        result = self._run()
        assert [g.stock_length_in for g in result.groups] == [48.0, 96.0]


# ─────────────────────────────────────────────────────────────────────────────
# Tests: invariants
# ─────────────────────────────────────────────────────────────────────────────

class TestInvariants:
    def test_group_waste_is_sum_of_leftovers(self):
        result = optimize(_bookcase_cuts(), default_stock())
        for group in result.groups:
            expected = sum(group.stock_length_in - c.length_in for c in group.cuts)
            assert group.waste_in == pytest.approx(expected)

    def test_per_piece_waste_recorded(self):
        result = optimize(_bookcase_cuts(), default_stock())
        for group in result.groups:
            for cut in group.cuts:
                assert cut.stock_length_in == group.stock_length_in
                assert cut.waste_in == pytest.approx(group.stock_length_in - cut.length_in)

    def test_never_exceeds_stock_quantity(self):
        stock = [
            StockLength(id="1", length_in=96.0, quantity=2, cost=12.99),
            StockLength(id="2", length_in=48.0, quantity=3, cost=6.99),
        ]
        cuts = [_cut("long", 60.0, qty=4), _cut("short", 20.0, qty=6)]
        result = optimize(cuts, stock)
        used = {g.stock_length_in: g.stock_used for g in result.groups}
        assert used.get(96.0, 0) <= 2
        assert used.get(48.0, 0) <= 3
        # 4 long pieces only fit 96" boards, so two are left over
        assert sum(1 for c in result.unassigned if c.id == "long") == 2

    def test_efficiency_within_bounds(self):
        result = optimize(_bookcase_cuts(), default_stock())
        for group in result.groups:
            assert 0 <= group.efficiency <= 100

    def test_exact_fit_is_full_efficiency(self):
        result = optimize([_cut("a", 48.0)], [StockLength(id="1", length_in=48.0, quantity=1)])
        assert result.groups[0].efficiency == pytest.approx(100.0)
        assert result.groups[0].waste_in == 0.0

    def test_deterministic(self):
        first = optimize(_bookcase_cuts(), default_stock())
        second = optimize(_bookcase_cuts(), default_stock())
        assert first.to_dict() == second.to_dict()

    def test_caller_inputs_untouched(self):
        cuts = _bookcase_cuts()
        stock = default_stock()
        optimize(cuts, stock)
        assert [s.quantity for s in stock] == [10, 8, 12]
        assert all(c.stock_length_in is None and c.waste_in is None for c in cuts)
        assert cuts[1].quantity == 5


# ─────────────────────────────────────────────────────────────────────────────
# Tests: allocation details
# ─────────────────────────────────────────────────────────────────────────────

class TestAllocation:
    def test_quantity_expanded_to_units(self):
        result = optimize([_cut("a", 20.0, qty=3)], default_stock())
        assert result.total_stock_used == 3
        assert all(c.quantity == 1 for g in result.groups for c in g.cuts)

    def test_tie_goes_to_first_stock_entry(self):
        stock = [
            StockLength(id="first", length_in=48.0, quantity=1, cost=1.0),
            StockLength(id="second", length_in=48.0, quantity=1, cost=2.0),
        ]
        result = optimize([_cut("a", 40.0)], stock)
        assert result.groups[0].cost == 1.0
        assert result.groups[0].remaining_stock == 1

    def test_exhausted_stock_moves_to_next_best(self):
        stock = [
            StockLength(id="1", length_in=96.0, quantity=5),
            StockLength(id="2", length_in=48.0, quantity=1),
        ]
        result = optimize([_cut("a", 40.0, qty=2)], stock)
        by_length = {g.stock_length_in: g for g in result.groups}
        assert by_length[48.0].stock_used == 1
        assert by_length[96.0].stock_used == 1
        assert by_length[96.0].remaining_stock == 4

    def test_piece_longer_than_all_stock_unassigned(self):
        result = optimize([_cut("beam", 120.0), _cut("a", 30.0)], default_stock())
        assert [c.id for c in result.unassigned] == ["beam"]
        assert not result.is_complete
        assert result.total_stock_used == 1

    def test_empty_stock_leaves_everything_unassigned(self):
        result = optimize([_cut("a", 30.0, qty=2)], [])
        assert result.groups == []
        assert len(result.unassigned) == 2

    def test_empty_cuts_give_empty_result(self):
        result = optimize([], default_stock())
        assert result.groups == []
        assert result.unassigned == []
        assert result.average_efficiency == 0.0


# ─────────────────────────────────────────────────────────────────────────────
# Tests: kerf
# ─────────────────────────────────────────────────────────────────────────────

class TestKerf:
    def test_kerf_blocks_near_exact_fit(self):
        stock = [StockLength(id="1", length_in=48.0, quantity=1),
                 StockLength(id="2", length_in=96.0, quantity=1)]
        result = optimize([_cut("a", 47.95)], stock, kerf_in=0.125)
        assert result.groups[0].stock_length_in == 96.0

    def test_exact_length_needs_no_kerf(self):
        stock = [StockLength(id="1", length_in=48.0, quantity=1)]
        result = optimize([_cut("a", 48.0)], stock, kerf_in=0.125)
        assert result.groups[0].stock_length_in == 48.0

    def test_waste_unchanged_by_kerf(self):
        stock = [StockLength(id="1", length_in=48.0, quantity=1)]
        result = optimize([_cut("a", 40.0)], stock, kerf_in=0.125)
        assert result.total_waste_in == 8.0
        assert result.kerf_in == 0.125


# ─────────────────────────────────────────────────────────────────────────────
# Tests: validation
# ─────────────────────────────────────────────────────────────────────────────

class TestValidation:
    def test_valid_input_has_no_errors(self):
        assert validate_inputs(_bookcase_cuts(), default_stock(), 0.125) == {}

    def test_non_positive_cut_length(self):
        errors = validate_inputs([_cut("a", 0.0)], default_stock())
        assert "cut_0_length" in errors

    def test_zero_quantity_stock(self):
        stock = [StockLength(id="1", length_in=96.0, quantity=0)]
        errors = validate_inputs([_cut("a", 10.0)], stock)
        assert "stock_0_quantity" in errors

    def test_negative_kerf_and_cost(self):
        stock = [StockLength(id="1", length_in=96.0, quantity=1, cost=-1.0)]
        errors = validate_inputs([_cut("a", 10.0)], stock, kerf_in=-0.1)
        assert set(errors) == {"kerf", "stock_0_cost"}

    def test_optimize_raises_with_errors(self):
        with pytest.raises(CutListValidationError) as exc:
            optimize([_cut("a", -5.0)], default_stock())
        assert "cut_0_length" in exc.value.errors
        assert isinstance(exc.value, ValueError)


# ─────────────────────────────────────────────────────────────────────────────
# Tests: serialization
# ─────────────────────────────────────────────────────────────────────────────

class TestSerialization:
    def test_from_dict_reads_grain_direction(self):
        piece = CutPiece.from_dict({"id": "a", "name": "Leg", "length_in": 28.0,
                                    "grain_direction": "with"})
        assert piece.grain_direction is GrainDirection.WITH
        assert piece.quantity == 1

    def test_result_dict_has_totals(self):
        data = optimize(_bookcase_cuts(), default_stock()).to_dict()
        for key in ("groups", "unassigned", "total_waste_in", "total_cost",
                    "total_stock_used", "average_efficiency"):
            assert key in data


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
