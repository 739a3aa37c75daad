# bias_review/constants.py
"""
Centralized magic constants organized by domain.

All hardcoded numbers/strings used by the influence-map engine and its
adapters are defined here with a note on what they bound.
"""


class HighlightLimits:
    """Character limits for quoted-phrase extraction and reason snippets."""

    # Quoted phrase extraction
    QUOTE_MIN_CHARS = 2                 # Shortest phrase kept (after trimming)
    QUOTE_MAX_CHARS = 60                # Longest run searched between quotes

    # Reason snippets
    REASON_LOOKAHEAD_CHARS = 120        # Forward cutoff when no sentence end follows
    REASON_FALLBACK_CHARS = 120         # Fallback prefix when body has no sentence end
    REASON_MAX_CHARS = 160              # Hard cap (truncation point)
    REASON_ELLIPSIS = "\u2026"          # Appended when a reason is truncated


class TooltipDefaults:
    """Hover tooltip placement constants."""

    FLIP_THRESHOLD_PX = 160             # Anchors closer than this to the top open below
    WIDTH_PX = 240


class CacheConfig:
    """Cache size constants."""

    INFLUENCE_MAP_MAX_ENTRIES = 128     # Memoized (content, bias, behaviour) triples


class RequestLimits:
    """Request validation limits for the HTTP API."""

    MAX_CONTENT_CHARS = 200_000         # Article body
