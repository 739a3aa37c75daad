# bias_review/services/influence_map/renderer.py
"""
HTML rendering of an influence map.

Highlighted segments are wrapped in:
  <mark class="influence-highlight" data-section="..." data-label="..." data-reason="...">...</mark>

The dashboard attaches the hover tooltip to those marks using the data
attributes. All text is HTML-escaped to avoid injection issues.
"""

import html
from typing import Iterable, Literal

from bias_review.constants import TooltipDefaults
from bias_review.services.influence_map.types import Category, InfluenceMap, Segment

TooltipPlacement = Literal["above", "below"]


def choose_tooltip_placement(
    anchor_top: float,
    threshold: float = TooltipDefaults.FLIP_THRESHOLD_PX,
) -> TooltipPlacement:
    """
    Pick the side of the anchor a tooltip opens on.

    Args:
        anchor_top: Distance in pixels from the viewport top to the anchor,
            measured when the tooltip is activated
        threshold: Anchors closer to the top than this open below
    """
    return "below" if anchor_top < threshold else "above"


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def render_segment(segment: Segment) -> str:
    """Render one segment; plain text is escaped as-is."""
    text = html.escape(segment.text)
    if not segment.is_highlight or segment.entry is None:
        return text

    entry = segment.entry
    colour = entry.category
    return (
        f'<mark class="influence-highlight" '
        f'data-section="{_attr(entry.section)}" '
        f'data-label="{_attr(colour.label)}" '
        f'data-reason="{_attr(entry.reason)}" '
        f'style="background: {colour.background}; border-bottom: 2px solid {colour.underline}">'
        f"{text}</mark>"
    )


def render_segments(segments: Iterable[Segment]) -> str:
    return "".join(render_segment(s) for s in segments)


def render_legend(legend: Iterable[Category]) -> str:
    """Render the legend as a row of colour dot + label pairs."""
    items = [
        f'<span class="influence-legend-item">'
        f'<span class="influence-legend-dot" style="background: {category.dot}"></span>'
        f"{html.escape(category.label)}</span>"
        for category in legend
    ]
    if not items:
        return ""
    return f'<div class="influence-legend">{"".join(items)}</div>'


def render_influence_map(
    influence_map: InfluenceMap,
    flip_threshold: int = TooltipDefaults.FLIP_THRESHOLD_PX,
    tooltip_width: int = TooltipDefaults.WIDTH_PX,
) -> str:
    """
    Render the full fragment: heading summary, legend, highlighted body.

    The wrapper carries the tooltip flip threshold and width so the dashboard
    script places tooltips with the same rule as choose_tooltip_placement.

    Returns "" when there is no body to render.
    """
    if not influence_map.segments:
        return ""

    return (
        f'<div class="influence-map" data-tooltip-flip-threshold="{flip_threshold}" '
        f'data-tooltip-width="{tooltip_width}">'
        f'<p class="influence-summary">{html.escape(influence_map.summary)}</p>'
        f"{render_legend(influence_map.legend)}"
        f'<div class="influence-body">{render_segments(influence_map.segments)}</div>'
        "</div>"
    )
