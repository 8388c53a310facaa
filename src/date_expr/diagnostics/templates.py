"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unknown_instant_type(value: object) -> Diagnostic:
        """Value cannot be converted to an instant.

        Args:
            value: The object that is not an instant

        Returns:
            Diagnostic for UNKNOWN_INSTANT_TYPE
        """
        type_name = type(value).__name__
        msg = f"Don't know how to convert {value!r} ({type_name}) to an instant"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_INSTANT_TYPE,
            message=msg,
            hint="Pass seconds since the epoch (int), an EpochTime or a datetime",
            input_value=repr(value),
        )

    @staticmethod
    def invalid_timezone(spec: object, reason: str | None = None) -> Diagnostic:
        """Timezone specifier not recognized.

        Args:
            spec: The rejected timezone specifier
            reason: Optional detail (e.g. unknown region)

        Returns:
            Diagnostic for INVALID_TIMEZONE
        """
        msg = f"Unrecognized timezone specified: {spec!r}"
        if reason:
            msg = f"{msg}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIMEZONE,
            message=msg,
            hint="Use None, a tzinfo, a region id like 'America/Los_Angeles' "
            "or an offset like '-0800'",
            input_value=repr(spec),
        )

    @staticmethod
    def unparseable_input(value: str, template: str, reason: str) -> Diagnostic:
        """Formatted string does not match the template.

        Args:
            value: The input string that failed to parse
            template: The date-expression template
            reason: The reason parsing failed

        Returns:
            Diagnostic for UNPARSEABLE_INPUT
        """
        msg = f"Cannot parse '{value}' with template '{template}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNPARSEABLE_INPUT,
            message=msg,
            hint="Input must be text previously rendered by the same template",
            template=template,
            input_value=value,
        )

    @staticmethod
    def no_timezone_in_template(template: str, formatted: str) -> Diagnostic:
        """Timezone extraction against a template lacking %z.

        Args:
            template: The date-expression template
            formatted: The formatted string

        Returns:
            Diagnostic for NO_TIMEZONE_IN_TEMPLATE
        """
        msg = (
            f"Can't extract timezone from formatted string '{formatted}' "
            f"because the template '{template}' doesn't have a timezone in it"
        )
        return Diagnostic(
            code=DiagnosticCode.NO_TIMEZONE_IN_TEMPLATE,
            message=msg,
            hint="Add %z to the template to record the UTC offset",
            template=template,
            input_value=formatted,
        )

    @staticmethod
    def no_granularity(template: str) -> Diagnostic:
        """Template carries no time field to step by.

        Args:
            template: The date-expression template

        Returns:
            Diagnostic for NO_GRANULARITY
        """
        msg = f"Template '{template}' has no date or time conversion specifier"
        return Diagnostic(
            code=DiagnosticCode.NO_GRANULARITY,
            message=msg,
            hint="Include at least one of %Y %m %d %p %H %h %M %S, "
            "or pass an explicit step",
            template=template,
        )
