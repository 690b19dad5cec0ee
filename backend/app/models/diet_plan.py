"""Diet plan Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel

DAYS_IN_PLAN = 7


class Meals(CamelModel):
    """Meal suggestions for one day."""

    breakfast: str = Field(description="Breakfast meal suggestion")
    lunch: str = Field(description="Lunch meal suggestion")
    dinner: str = Field(description="Dinner meal suggestion")
    snacks: Optional[str] = Field(None, description="Snack suggestions")


class DailyPlan(CamelModel):
    """One day of a weekly plan."""

    day: str = Field(description="The day of the week (e.g., Monday)")
    meals: Meals
    daily_total: str = Field(description="Summary of total calories and macros for the day")


class MacronutrientDistribution(CamelModel):
    """Recommended macro split in percent. Expected, not enforced, to total 100."""

    carbs: float = Field(description="Percentage of carbohydrates")
    protein: float = Field(description="Percentage of protein")
    fat: float = Field(description="Percentage of fat")

    @property
    def total(self) -> float:
        return self.carbs + self.protein + self.fat


class DietPlan(CamelModel):
    """A generated seven-day diet plan."""

    summary: str = Field(description="A brief, encouraging summary of the diet plan strategy")
    macronutrient_distribution: MacronutrientDistribution
    weekly_plan: list[DailyPlan] = Field(
        min_length=DAYS_IN_PLAN,
        max_length=DAYS_IN_PLAN,
        description="A 7-day meal plan",
    )

    @property
    def day_labels(self) -> list[str]:
        return [entry.day for entry in self.weekly_plan]
