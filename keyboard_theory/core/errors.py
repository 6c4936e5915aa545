"""Exceptions raised by the theory layer."""


class TheoryError(ValueError):
    """Base class for invalid musical input."""


class InvalidNoteName(TheoryError):
    """Raised when a string is not one of the 12 canonical note spellings."""

    def __init__(self, name, message=None):
        self.name = name
        super().__init__(message or f"Invalid note name: {name!r}")
