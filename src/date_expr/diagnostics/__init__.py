"""Diagnostic system for date-expr errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateExprError,
    InvalidTimezoneError,
    NoGranularityError,
    NoTimezoneInTemplateError,
    UnknownInstantTypeError,
    UnparseableInputError,
)
from .formatter import LOG_FORMATTER, DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "LOG_FORMATTER",
    "DateExprError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidTimezoneError",
    "NoGranularityError",
    "NoTimezoneInTemplateError",
    "OutputFormat",
    "UnknownInstantTypeError",
    "UnparseableInputError",
]
