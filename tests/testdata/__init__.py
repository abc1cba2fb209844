"""Shared test-only inputs with known duplicates."""

from .inputs import (
    ADJACENT_PAIR,
    EVEN_SCENARIOS,
    NO_DUPLICATE,
    SAME_HALF_PAIR,
    SAME_QUARTER_PAIR,
    SCENARIOS,
    STRADDLING_PAIR,
    UNIQUE_16,
)

__all__ = [
    "STRADDLING_PAIR",
    "ADJACENT_PAIR",
    "NO_DUPLICATE",
    "SAME_QUARTER_PAIR",
    "SAME_HALF_PAIR",
    "UNIQUE_16",
    "SCENARIOS",
    "EVEN_SCENARIOS",
]
