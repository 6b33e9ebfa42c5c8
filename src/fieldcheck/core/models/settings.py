"""
ValidatorSettings model holding the explicit configuration of a Validator.
"""

import re
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidatorSettings(BaseModel):
    """
    Construction-time configuration for a Validator.

    Attributes:
        debug: Diagnostics mode; makes custom_pattern() raise on mismatch
        messages: Complete replacement template set (None keeps the defaults)
        patterns: Extra named regex fragments for match_pattern()
    """

    debug: bool = False
    messages: Dict[str, str] | None = None
    patterns: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "debug": False,
                "messages": None,
                "patterns": {"zip": "[0-9]{5}"},
            }
        }
    )

    @field_validator("patterns")
    @classmethod
    def check_patterns(cls, v):
        """Pattern names must be non-empty and unreserved, fragments must compile."""
        for name, fragment in v.items():
            if not name:
                raise ValueError("pattern names must not be empty")
            if name == "array":
                raise ValueError("pattern name 'array' is reserved")
            try:
                re.compile(fragment)
            except re.error as e:
                raise ValueError(f"pattern '{name}' does not compile: {e}")
        return v
