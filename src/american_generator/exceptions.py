"""Exceptions raised by the profile core."""


class AmericanGeneratorError(Exception):
    """Base class for all american_generator errors."""


class InvalidFieldError(AmericanGeneratorError, ValueError):
    """Raised when a field identifier is not one of the eight profile fields."""

    def __init__(self, field: object):
        self.field = field
        super().__init__(f"Unknown profile field: {field!r}")


class GenerationFailure(AmericanGeneratorError, RuntimeError):
    """Raised when the fake-data source fails to produce a complete profile."""
