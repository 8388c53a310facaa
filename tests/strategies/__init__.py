"""Hypothesis strategies for date-expr property-based testing.

- templates: Templates, literal segments and specifier runs
- instants: Epoch seconds and their three representations

Usage:
    from tests.strategies import templates, epoch_seconds
"""

from .instants import any_instants, epoch_seconds, utc_datetimes
from .templates import (
    COARSE_TEMPLATES,
    literal_text,
    specifier_codes,
    templates,
)

__all__ = [
    "COARSE_TEMPLATES",
    "any_instants",
    "epoch_seconds",
    "literal_text",
    "specifier_codes",
    "templates",
    "utc_datetimes",
]
