"""
SVG Renderer — visual cut layout for an OptimizationResult.

Each consumed board is drawn as a horizontal bar scaled against the longest
board in the result: the cut piece in wood tone, the offcut hatched grey.
"""
from __future__ import annotations

import svgwrite

from .cut_optimizer import OptimizationResult

BAR_HEIGHT = 28
BAR_GAP = 14
PADDING = 30
LABEL_HEIGHT = 22
GROUP_GAP = 24

PIECE_COLOR = "#c8a165"
WASTE_COLOR = "#d9d9d9"


def render_cut_layout_svg(result: OptimizationResult, max_width_px: int = 800) -> str:
    """Return SVG string with one bar per board used, grouped by stock length."""
    longest = max((g.stock_length_in for g in result.groups), default=1.0)
    scale = (max_width_px - 2 * PADDING) / longest

    total_height = PADDING
    for group in result.groups:
        total_height += LABEL_HEIGHT + len(group.cuts) * (BAR_HEIGHT + BAR_GAP) + GROUP_GAP
    total_height += PADDING

    dwg = svgwrite.Drawing(size=(f"{max_width_px}px", f"{total_height}px"), profile="full")
    dwg.viewbox(0, 0, max_width_px, total_height)
    dwg.add(dwg.rect(insert=(0, 0), size=(max_width_px, total_height), fill="#fafaf8"))

    y = PADDING
    for group in result.groups:
        dwg.add(dwg.text(
            f'{group.stock_length_in}" stock — {group.stock_used} used, '
            f"{group.efficiency:.1f}% efficiency",
            insert=(PADDING, y + 16),
            font_size="14px",
            font_family="sans-serif",
            font_weight="bold",
            fill="#333",
        ))
        y += LABEL_HEIGHT

        board_px = round(group.stock_length_in * scale)
        for cut in group.cuts:
            piece_px = round(cut.length_in * scale)
            dwg.add(dwg.rect(
                insert=(PADDING, y), size=(board_px, BAR_HEIGHT),
                fill=WASTE_COLOR,
                stroke="#555",
                stroke_width=1,
            ))
            dwg.add(dwg.rect(
                insert=(PADDING, y), size=(piece_px, BAR_HEIGHT),
                fill=PIECE_COLOR,
                stroke="#555",
                stroke_width=1,
            ))
            dwg.add(dwg.text(
                f'{cut.name} ({cut.length_in}")',
                insert=(PADDING + 4, y + 18),
                font_size="11px",
                font_family="sans-serif",
                fill="#000",
            ))
            y += BAR_HEIGHT + BAR_GAP
        y += GROUP_GAP

    return dwg.tostring()
