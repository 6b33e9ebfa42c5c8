"""
ValidationReport model summarizing a finalized validator (ephemeral).
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class ValidationReport(BaseModel):
    """
    Outcome of a validation session.

    Attributes:
        passed: True when no check failed
        errors: Rendered messages per field, in the order fields first failed
        first_error: First message of the first failing field, or ""
    """

    passed: bool
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    first_error: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "passed": False,
                "errors": {"Age": ["Age must be between 18 and 65"]},
                "first_error": "Age must be between 18 and 65",
            }
        }
    )

    @computed_field
    @property
    def field_count(self) -> int:
        """Number of fields with at least one failure."""
        return len(self.errors)

    @model_validator(mode="after")
    def check_passed_consistency(self):
        """passed=True implies there are no errors."""
        if self.passed and self.errors:
            raise ValueError("passed=True but errors is not empty")
        return self
