"""Exceptions raised by the similarity engine."""


class InvalidArgumentError(ValueError):
    """Raised when an algorithm name, option or input cannot be used.

    Always raised before any scoring work begins.
    """
