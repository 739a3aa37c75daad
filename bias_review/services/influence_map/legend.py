# bias_review/services/influence_map/legend.py
"""
Legend of categories active in an analysis.

Driven by the sections the entries were quoted under, not by whether the
phrases were later found in the body.
"""

from typing import Iterable

from bias_review.services.influence_map.categories import resolve_category, table_position
from bias_review.services.influence_map.types import Category, HighlightEntry


def build_legend(entries: Iterable[HighlightEntry]) -> list[Category]:
    """
    Categories used by the entries, in colour-table order, unique by label.

    Section names missing from the table sort after known ones, in the order
    they were first seen.
    """
    sections: list[str] = []
    for entry in entries:
        if entry.section not in sections:
            sections.append(entry.section)

    def _order(section: str) -> tuple[int, int]:
        position = table_position(section)
        if position is None:
            return (1, sections.index(section))
        return (0, position)

    legend = []
    labels: set[str] = set()
    for section in sorted(sections, key=_order):
        category = resolve_category(section)
        if category.label in labels:
            continue
        labels.add(category.label)
        legend.append(category)
    return legend
