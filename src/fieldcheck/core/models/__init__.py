"""
Data models for validator configuration and reporting.

All models use Pydantic for runtime validation and type safety.
"""

from .settings import ValidatorSettings
from .validation_report import ValidationReport

__all__ = [
    "ValidatorSettings",
    "ValidationReport",
]
