"""Health profile Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel


class HealthProfile(CamelModel):
    """A user's health profile, the input to diet plan generation."""

    bmi: float = Field(ge=10, le=60, allow_inf_nan=False, description="Body Mass Index")
    age: int = Field(ge=12, le=120, description="Age in years")
    medical_history: str = Field(
        min_length=2,
        max_length=500,
        description='Past medical conditions, or "None"',
    )
    dietary_preferences: Optional[str] = Field(
        None,
        max_length=500,
        description="Dietary preferences or restrictions",
    )

    @property
    def preferences_or_none(self) -> str:
        """Dietary preferences as sent to the generator ("None" when blank)."""
        if self.dietary_preferences and self.dietary_preferences.strip():
            return self.dietary_preferences
        return "None"
