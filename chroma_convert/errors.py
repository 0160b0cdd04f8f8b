"""
Errors raised by chroma_convert.
Parsing is all-or-nothing: every failure carries the offending input text.
"""


class ChromaError(ValueError):
    """Base class for color parsing failures."""

    prefix = "Invalid color"

    def __init__(self, value):
        self.value = value
        super().__init__(f"{self.prefix}: {value}")


class InvalidHexColor(ChromaError):
    """Raised when a string expected to be hex fails the hex predicate."""

    prefix = "Invalid hex color"


class InvalidColorString(ChromaError):
    """Raised when a string matches none of the supported notations."""

    prefix = "Invalid color string"
