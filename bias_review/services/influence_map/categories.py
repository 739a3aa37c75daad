# bias_review/services/influence_map/categories.py
"""
Section -> category colour table.

Every recognized analysis header maps to a fixed Category. Spelling variants
of one conceptual section ("AND" vs "&", British vs American) are separate
keys that share a display label, so the legend shows them once.

The table is built once at import and exposed read-only.
"""

from types import MappingProxyType
from typing import Mapping

from bias_review.services.influence_map.types import Category


def _category(name: str, label: str, background: str, colour: str) -> Category:
    return Category(name=name, label=label, background=background, underline=colour, dot=colour)


# Insertion order is the legend order.
_SECTION_CATEGORIES: dict[str, Category] = {
    "LANGUAGE INTENSITY": _category(
        "LANGUAGE INTENSITY", "LANGUAGE INTENSITY", "rgba(245, 158, 11, 0.12)", "#f59e0b"
    ),
    "EMOTIONAL TRIGGERS": _category(
        "EMOTIONAL TRIGGERS", "EMOTIONAL TRIGGER", "rgba(239, 68, 68, 0.10)", "#ef4444"
    ),
    "FRAMING": _category(
        "FRAMING", "FRAMING", "rgba(59, 130, 246, 0.10)", "#3b82f6"
    ),
    "SENSATIONALISM": _category(
        "SENSATIONALISM", "SENSATIONALISM", "rgba(249, 115, 22, 0.10)", "#f97316"
    ),
    "SOCIAL AND IDENTITY CUES": _category(
        "SOCIAL AND IDENTITY CUES", "SOCIAL & IDENTITY", "rgba(234, 179, 8, 0.12)", "#eab308"
    ),
    "SOCIAL & IDENTITY CUES": _category(
        "SOCIAL & IDENTITY CUES", "SOCIAL & IDENTITY", "rgba(234, 179, 8, 0.12)", "#eab308"
    ),
    "MOTIVATION AND ACTION SIGNALS": _category(
        "MOTIVATION AND ACTION SIGNALS", "MOTIVATION & ACTION", "rgba(168, 85, 247, 0.10)", "#a855f7"
    ),
    "MOTIVATION & ACTION SIGNALS": _category(
        "MOTIVATION & ACTION SIGNALS", "MOTIVATION & ACTION", "rgba(168, 85, 247, 0.10)", "#a855f7"
    ),
    "ATTENTION AND SALIENCE": _category(
        "ATTENTION AND SALIENCE", "ATTENTION & SALIENCE", "rgba(16, 185, 129, 0.10)", "#10b981"
    ),
    "ATTENTION & SALIENCE": _category(
        "ATTENTION & SALIENCE", "ATTENTION & SALIENCE", "rgba(16, 185, 129, 0.10)", "#10b981"
    ),
    "OVERALL INTERPRETATION": _category(
        "OVERALL INTERPRETATION", "OVERALL", "rgba(99, 102, 241, 0.10)", "#6366f1"
    ),
    "OVERALL BEHAVIOURAL INTERPRETATION": _category(
        "OVERALL BEHAVIOURAL INTERPRETATION", "OVERALL", "rgba(99, 102, 241, 0.10)", "#6366f1"
    ),
    "OVERALL BEHAVIORAL INTERPRETATION": _category(
        "OVERALL BEHAVIORAL INTERPRETATION", "OVERALL", "rgba(99, 102, 241, 0.10)", "#6366f1"
    ),
}

SECTION_CATEGORIES: Mapping[str, Category] = MappingProxyType(_SECTION_CATEGORIES)

FALLBACK_CATEGORY = Category(
    name="FLAGGED",
    label="FLAGGED",
    background="rgba(148, 163, 184, 0.10)",
    underline="#94a3b8",
    dot="#94a3b8",
    is_fallback=True,
)

# Headers the section parser recognizes, in table order
RECOGNIZED_HEADERS: tuple[str, ...] = tuple(_SECTION_CATEGORIES)

# Position of each key in the table, used to order the legend
_TABLE_ORDER = {name: idx for idx, name in enumerate(_SECTION_CATEGORIES)}


def resolve_category(section_name: str) -> Category:
    """Map a section name to its category, falling back to FLAGGED."""
    return SECTION_CATEGORIES.get(section_name, FALLBACK_CATEGORY)


def table_position(section_name: str) -> int | None:
    """Index of a section name in the colour table, or None if unrecognized."""
    return _TABLE_ORDER.get(section_name)
