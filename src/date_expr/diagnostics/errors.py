"""date-expr exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. None of these errors is retryable: every operation is
deterministic, so the same input fails the same way.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateExprError",
    "InvalidTimezoneError",
    "NoGranularityError",
    "NoTimezoneInTemplateError",
    "UnknownInstantTypeError",
    "UnparseableInputError",
]


class DateExprError(Exception):
    """Base exception for all date-expr errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateExprError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownInstantTypeError(DateExprError):
    """Value is not an int, EpochTime or datetime.

    Attributes:
        value: The rejected object
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidTimezoneError(DateExprError):
    """Timezone specifier matches none of the accepted shapes.

    Accepted: None, a tzinfo, a region id ("America/Los_Angeles") or a
    fixed offset ("-0800").
    """


class UnparseableInputError(DateExprError):
    """Formatted string does not match the template's pattern.

    Attributes:
        input_value: The string that failed to parse
        template: The template it was parsed against
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        template: str = "",
    ) -> None:
        """Initialize UnparseableInputError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            template: The template used for parsing
        """
        super().__init__(message)
        self.input_value = input_value
        self.template = template


class NoTimezoneInTemplateError(DateExprError):
    """Timezone extraction requested for a template without %z."""


class NoGranularityError(DateExprError):
    """Template has no time field, so no range step can be inferred.

    Example:
        formatted_date_range(a, b, make_date_expr("static/%z"))
    """
