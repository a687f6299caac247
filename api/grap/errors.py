"""Exceptions raised by the grap model."""


class InvalidArgumentError(ValueError):
    """Raised when a constructor or population call receives a bad argument."""
