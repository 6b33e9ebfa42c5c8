"""
Chainable field validation.

Provides the Validator, which accumulates templated failures per field, and
the predicates and regex fragments its checks are built on.
"""

from fieldcheck.errors import ConfigurationError

from .patterns import BUILTIN_PATTERNS
from .validator import Validator

__all__ = [
    "Validator",
    "ConfigurationError",
    "BUILTIN_PATTERNS",
]
