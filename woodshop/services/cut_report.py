"""
Cut Report — plain-text and tabular renderings of an OptimizationResult.

The text report mirrors what a woodworker takes to the lumber yard: stock
on hand, then each stock length with the pieces cut from it and the waste.
"""
from __future__ import annotations

from .cut_optimizer import OptimizationResult, StockLength

CSV_HEADER = ["Stock Length (in)", "Piece", "Length (in)", "Width (in)",
              "Thickness (in)", "Material", "Waste (in)"]


def format_cut_report(result: OptimizationResult, stock: list[StockLength]) -> list[str]:
    lines: list[str] = [
        "CUT LIST OPTIMIZATION REPORT",
        "============================",
        "",
        f'Kerf: {result.kerf_in}"',
        "",
        "STOCK REQUIREMENTS:",
    ]
    for s in stock:
        lines.append(f'{s.length_in}" stock: {s.quantity} pieces @ ${s.cost:.2f} each')

    lines.append("")
    lines.append("OPTIMIZED CUTS:")
    for i, group in enumerate(result.groups, start=1):
        lines.append("")
        lines.append(
            f'Group {i} - {group.stock_length_in}" stock ({group.efficiency:.1f}% efficiency)'
        )
        lines.append(f"Stock used: {group.stock_used} piece{'s' if group.stock_used != 1 else ''}")
        for cut in group.cuts:
            lines.append(f"  {cut.label()}")
        lines.append(f'  Total waste: {group.waste_in:.2f}"')

    if result.unassigned:
        lines.append("")
        lines.append("UNASSIGNED (no stock long enough):")
        for cut in result.unassigned:
            lines.append(f"  {cut.label()}")

    lines.append("")
    lines.append(f'Total waste: {result.total_waste_in:.2f}"')
    lines.append(f"Total cost: ${result.total_cost:.2f}")
    lines.append(f"Average efficiency: {result.average_efficiency:.1f}%")
    return lines


def cut_rows(result: OptimizationResult) -> list[list]:
    """One row per assigned unit, then unassigned units with a blank stock length."""
    rows: list[list] = []
    for group in result.groups:
        for cut in group.cuts:
            rows.append([group.stock_length_in, cut.name, cut.length_in, cut.width_in,
                         cut.thickness_in, cut.material, cut.waste_in])
    for cut in result.unassigned:
        rows.append(["", cut.name, cut.length_in, cut.width_in,
                     cut.thickness_in, cut.material, ""])
    return rows
