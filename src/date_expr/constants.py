"""Shared constants for date-expr.

This module provides centralized configuration constants used across
the patterns, core and expression layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale: CLDR locale used when rendering
- Cache limits: Memory bounds for translated pattern caches
- Timezones: Specifier shapes accepted by parse_timezone()

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale
    "DEFAULT_LOCALE",
    # Cache limits
    "PATTERN_CACHE_SIZE",
    # Timezones
    "FIXED_OFFSET_PATTERN",
    "REGION_ID_PATTERN",
]

# ============================================================================
# LOCALE
# ============================================================================

# CLDR locale used for rendering. Only the day-period names (%p) depend on
# it; digits are always ASCII. en_US yields "AM"/"PM", which is also what
# strptime's %p accepts in the C locale.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached template translations (render and parse patterns).
# Templates are usually a handful of path layouts per process.
PATTERN_CACHE_SIZE: int = 256

# ============================================================================
# TIMEZONES
# ============================================================================

# Fixed offsets "+hhmm"/"-hhmm" and IANA region ids "Area/City".
FIXED_OFFSET_PATTERN: str = r"([+-])(\d{2})(\d{2})"
REGION_ID_PATTERN: str = r"[A-Za-z_]+(?:/[A-Za-z0-9_+\-]+)+"
