"""date-expr - Render, parse and enumerate date-dependent strings.

A date expression is a template such as "s3://bucket/logs/%Y/%m/%d/%H"
whose percent specifiers are filled from an instant in time. date-expr
renders templates, parses rendered strings back into instants, infers a
template's granularity, and enumerates every rendering between two bounds.

Public API:
    DateExpr - Immutable template + timezone value
    make_date_expr - Construct a DateExpr from a timezone specifier
    extract_timezone - Read the UTC offset out of a rendered string
    has_timezone - Check a template for a %z specifier
    formatted_date_range - Rendered strings between two bounds
    EpochTime - Wrapped seconds-since-epoch instant
    Granularity - Ordered time units of conversion specifiers

Exceptions:
    DateExprError - Base exception class
    UnknownInstantTypeError, InvalidTimezoneError, UnparseableInputError,
    NoTimezoneInTemplateError, NoGranularityError

Submodules:
    date_expr.patterns - Specifier table, pattern translation, granularity
    date_expr.core - Instant coercion and timezone specifiers
    date_expr.ranges - Range generation and per-period helpers
    date_expr.diagnostics - Error types and diagnostic formatting
"""

from .core import (
    EpochTime,
    epoch_time_now,
    to_datetime,
    to_epoch_time,
    to_seconds_since_epoch,
)
from .diagnostics import (
    DateExprError,
    InvalidTimezoneError,
    NoGranularityError,
    NoTimezoneInTemplateError,
    UnknownInstantTypeError,
    UnparseableInputError,
)
from .enums import Granularity
from .expression import DateExpr, extract_timezone, has_timezone, make_date_expr
from .ranges import FormattedDateRange, formatted_date_range

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("date-expr")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateExpr",
    "DateExprError",
    "EpochTime",
    "FormattedDateRange",
    "Granularity",
    "InvalidTimezoneError",
    "NoGranularityError",
    "NoTimezoneInTemplateError",
    "UnknownInstantTypeError",
    "UnparseableInputError",
    "__version__",
    "epoch_time_now",
    "extract_timezone",
    "formatted_date_range",
    "has_timezone",
    "make_date_expr",
    "to_datetime",
    "to_epoch_time",
    "to_seconds_since_epoch",
]
