"""Generation settings.

Settings declare how profiles are drawn (age range, date format, seed)
without containing any generation logic themselves.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# The only locale profiles are generated for.
LOCALE = "en_US"


class GeneratorSettings(BaseModel):
    """Configuration for profile generation."""

    model_config = ConfigDict(extra="forbid")

    min_age: int = Field(default=18, ge=0, description="Youngest age a birthdate may represent")
    max_age: int = Field(default=80, ge=0, description="Oldest age a birthdate may represent")
    date_format: str = Field(
        default="%m/%d/%Y",
        description="strftime pattern used to format birthdates"
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible profiles"
    )

    @field_validator("date_format")
    @classmethod
    def check_date_format(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("date_format must not be empty")
        date(2000, 1, 2).strftime(value)
        return value

    @model_validator(mode="after")
    def check_age_range(self) -> "GeneratorSettings":
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            )
        return self

    def format_date(self, value: date) -> str:
        """Format a birthdate with the configured pattern."""
        return value.strftime(self.date_format)
