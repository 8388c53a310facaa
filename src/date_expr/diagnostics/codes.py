"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Instant errors (input that is not a point in time)
        2000-2999: Timezone errors (unrecognized timezone specifiers)
        3000-3999: Parsing errors (formatted strings that do not match)
        4000-4999: Range errors (templates unusable for range generation)
    """

    # Instant errors (1000-1999)
    UNKNOWN_INSTANT_TYPE = 1001

    # Timezone errors (2000-2999)
    INVALID_TIMEZONE = 2001

    # Parsing errors (3000-3999)
    UNPARSEABLE_INPUT = 3001
    NO_TIMEZONE_IN_TEMPLATE = 3002

    # Range errors (4000-4999)
    NO_GRANULARITY = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        template: Date-expression template involved (if any)
        input_value: Offending input, rendered with repr() where not a string
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    template: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[UNPARSEABLE_INPUT]: Cannot parse 'foo' with template '%Y/%m'
              --> template: %Y/%m
              = input: foo
              = help: Input must be text previously rendered by the same template

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
