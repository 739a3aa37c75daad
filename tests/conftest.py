# tests/conftest.py
"""
Pytest configuration and fixtures.
"""

import os

import pytest

# Set test environment before the app reads its settings
os.environ.setdefault("TESTING", "1")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "INFO")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "property: randomized invariant checks over generated fixtures")


# Shared fixture texts from the dashboard's analysis format
FRAMING_ANALYSIS = 'FRAMING The report called it a "historic betrayal" by officials.'
FRAMING_CONTENT = "Officials described the deal as a historic betrayal of allies."


@pytest.fixture
def framing_analysis() -> str:
    return FRAMING_ANALYSIS


@pytest.fixture
def framing_content() -> str:
    return FRAMING_CONTENT


@pytest.fixture
def make_entry():
    """Factory for HighlightEntry objects with a resolved category."""
    from bias_review.services.influence_map import HighlightEntry, resolve_category

    def _make(phrase: str, section: str = "FRAMING", reason: str = "") -> HighlightEntry:
        return HighlightEntry(
            phrase=phrase,
            section=section,
            reason=reason,
            category=resolve_category(section),
        )

    return _make
