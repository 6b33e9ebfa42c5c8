"""
Exceptions raised for validator misuse.

Validation failures are never raised; they are accumulated as data on the
Validator. ConfigurationError covers programmer-level mistakes only.
"""

from typing import Sequence


class ConfigurationError(ValueError):
    """
    Raised when a validator is set up or used incorrectly.

    Attributes:
        missing_keys: Message kinds absent from an override set (if any)
        pattern: The offending regex fragment (if any)
    """

    def __init__(
        self,
        message: str,
        missing_keys: Sequence[str] | None = None,
        pattern: str | None = None,
    ):
        self.message = message
        self.missing_keys = list(missing_keys or [])
        self.pattern = pattern
        super().__init__(message)
