"""
Display helpers for a generated plan.

The current plan is owned by the caller. SessionPlanStore keeps it in any
string-to-string mapping (a stand-in for browser session storage) so a
per-day view can read it back later.
"""

import logging
from collections.abc import MutableMapping
from typing import Optional

from app.models.diet_plan import DailyPlan, DietPlan
from app.services.errors import ValidationFailure
from app.services.validation import validate_diet_plan

logger = logging.getLogger(__name__)

PLAN_STORAGE_KEY = "dietPlan"
DAY_NOT_FOUND_MESSAGE = "Meal plan for this day not found."

DEFAULT_CATEGORY_ICON = "shopping-cart"
CATEGORY_ICONS = {
    "produce": "carrot",
    "protein": "beef",
    "meat": "beef",
    "dairy & alternatives": "milk",
    "dairy": "milk",
    "grains": "wheat",
    "pantry staples": "wheat",
}


def find_day(plan: DietPlan, day: str) -> Optional[DailyPlan]:
    """Case-insensitive lookup of one day's plan by its label."""
    wanted = day.strip().lower()
    for entry in plan.weekly_plan:
        if entry.day.strip().lower() == wanted:
            return entry
    return None


def category_icon(category: str) -> str:
    """Best-effort icon name for a free-text shopping category."""
    return CATEGORY_ICONS.get(category.strip().lower(), DEFAULT_CATEGORY_ICON)


class SessionPlanStore:
    """Keeps the most recent plan serialized under a fixed key."""

    def __init__(self, storage: MutableMapping[str, str], key: str = PLAN_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def save(self, plan: DietPlan) -> None:
        self.storage[self.key] = plan.model_dump_json(by_alias=True, exclude_none=True)

    def load(self) -> Optional[DietPlan]:
        """Return the stored plan, or None when missing or unreadable."""
        stored = self.storage.get(self.key)
        if not stored:
            return None

        plan = validate_diet_plan(stored)
        if isinstance(plan, ValidationFailure):
            logger.error(f"Failed to parse diet plan from session storage: {plan}")
            return None
        return plan

    def clear(self) -> None:
        self.storage.pop(self.key, None)

    def day(self, day: str) -> Optional[DailyPlan]:
        plan = self.load()
        if plan is None:
            return None
        return find_day(plan, day)
