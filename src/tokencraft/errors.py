"""
Error types for tokencraft configuration validation and generation.
"""

from __future__ import annotations


class TokencraftError(Exception):
    """Base exception for all tokencraft errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(TokencraftError):
    """
    Raised when a design system configuration is rejected before generation.

    Examples:
    - Missing or non-list ``modes``
    - Spacing ``range`` that is not a positive integer
    - Alpha schedule level outside [0, 1]
    - Gap or border radius configured without spacing

    Attributes:
        path: Dotted path of the offending configuration field, if known
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class GeneratorError(TokencraftError):
    """
    Raised when generation hits a state validation should have ruled out.

    This signals a wiring bug in the generator, not a problem with user input.
    """

    pass


class DesignSystemLoadError(TokencraftError):
    """Raised when a design system file cannot be read or parsed."""

    pass
