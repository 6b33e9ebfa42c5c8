"""
fieldcheck - fluent field validation with templated error messages.
"""

import logging

from fieldcheck.core.messages import DEFAULT_MESSAGES, load_messages
from fieldcheck.core.models import ValidationReport, ValidatorSettings
from fieldcheck.core.validators import Validator
from fieldcheck.errors import ConfigurationError

__version__ = "0.1.0"

# Silent unless the application configures logging (or calls setup_logger)
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Validator",
    "ValidatorSettings",
    "ValidationReport",
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "load_messages",
]
