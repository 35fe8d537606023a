"""
Error types for hueforge color generation and palette configuration.
"""

from dataclasses import dataclass
from typing import Any


class HueforgeError(Exception):
    """Base exception for all hueforge errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} ({self.context.format()})"
        return self.message


class InvalidColorFormat(HueforgeError):
    """
    Raised when a color string cannot be decoded.

    Examples:
    - Non-hex characters ("#12345G")
    - Wrong length after normalization ("#12345")
    - Non-string input
    """

    pass


class InvalidParameter(HueforgeError):
    """
    Raised when a generation parameter is out of its domain.

    Examples:
    - count < 1
    - Unknown scheme, mode or color-blindness tag
    - Unknown role type
    """

    pass


class PaletteSpecError(HueforgeError):
    """
    Raised when palettespec.yaml cannot be loaded or validated.

    Examples:
    - File missing and defaults disabled
    - Invalid YAML
    - Schema violations (bad base color, count < 1)
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error: which input was rejected.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
        allowed: Optional list of accepted values
    """

    parameter: str
    value: Any
    allowed: list[str] | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "scheme='hexagonal'; expected one of: a, b"
        """
        text = f"{self.parameter}={self.value!r}"
        if self.allowed:
            text += f"; expected one of: {', '.join(self.allowed)}"
        return text


def make_color_error(message: str, value: Any) -> InvalidColorFormat:
    """
    Helper to create an InvalidColorFormat with the rejected value attached.

    Args:
        message: Error description
        value: The color input that failed to parse

    Returns:
        InvalidColorFormat with context attached
    """
    return InvalidColorFormat(message, ErrorContext(parameter="color", value=value))


def make_parameter_error(
    message: str,
    parameter: str,
    value: Any,
    allowed: list[str] | None = None,
) -> InvalidParameter:
    """
    Helper to create an InvalidParameter with context.

    Args:
        message: Error description
        parameter: Parameter name
        value: Rejected value
        allowed: Optional accepted values

    Returns:
        InvalidParameter with context attached
    """
    return InvalidParameter(message, ErrorContext(parameter=parameter, value=value, allowed=allowed))
