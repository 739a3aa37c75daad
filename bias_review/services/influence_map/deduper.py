# bias_review/services/influence_map/deduper.py
"""
Deduplication of highlight entries across analysis texts.

Dedupe rules:
1. Two entries are the same if their phrases match case-insensitively
2. The first occurrence wins (bias explanation is merged before behavioural analysis)
3. Relative order of the survivors is preserved
"""

from typing import Iterable

from bias_review.services.influence_map.types import HighlightEntry


class HighlightDeduper:
    """Deduplication service for highlight entries."""

    @staticmethod
    def normalize_phrase(phrase: str) -> str:
        """Normalize a phrase to its uniqueness key."""
        if not phrase:
            return ""
        return phrase.lower()

    def merge(self, *sources: Iterable[HighlightEntry]) -> list[HighlightEntry]:
        """
        Merge entry lists in the order given, keeping the first of each phrase.

        Args:
            sources: Entry iterables, highest priority first

        Returns:
            Entries unique by lowercase phrase
        """
        seen: set[str] = set()
        merged = []
        for entries in sources:
            for entry in entries:
                key = self.normalize_phrase(entry.phrase)
                if key in seen:
                    continue
                seen.add(key)
                merged.append(entry)
        return merged
