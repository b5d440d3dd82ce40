"""
Error types for tonal color parsing and configuration.
"""


class TonalError(Exception):
    """Base exception for all tonal errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ColorParseError(TonalError, ValueError):
    """
    Raised when a color string cannot be parsed.

    Examples:
    - Unknown notation ("blue-ish")
    - Wrong hex length ("#12345")
    - Non-numeric rgba() channels

    Palette generators never let this escape; it is raised only by
    the strict ``parse_color`` entry point.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unparsable color: {value!r}")
