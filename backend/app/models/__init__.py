"""Pydantic models for the nutrigenius API."""

from .base import CamelModel
from .profile import HealthProfile
from .diet_plan import (
    DAYS_IN_PLAN,
    Meals,
    DailyPlan,
    MacronutrientDistribution,
    DietPlan,
)
from .shopping import (
    ShoppingItem,
    ShoppingCategory,
    ShoppingList,
)
from .assistant import (
    RecipeSuggestions,
    ChatAnswer,
)
from .results import ActionResult

__all__ = [
    "CamelModel",
    # Profile
    "HealthProfile",
    # Diet plan
    "DAYS_IN_PLAN",
    "Meals",
    "DailyPlan",
    "MacronutrientDistribution",
    "DietPlan",
    # Shopping
    "ShoppingItem",
    "ShoppingCategory",
    "ShoppingList",
    # Assistant
    "RecipeSuggestions",
    "ChatAnswer",
    # Results
    "ActionResult",
]
