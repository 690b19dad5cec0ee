"""
Actions - the entry points used by the web frontend.

Every action returns an ActionResult holding exactly one of ``data`` or
``error``. Nothing raises to the caller: input problems are rejected before
any generation call, and generation failures become a fixed message per use
case while the detail goes to the log.
"""

import logging
from typing import Any, Optional

from app.models.diet_plan import DietPlan
from app.models.results import ActionResult
from app.models.shopping import ShoppingList
from app.services.errors import EmptyInputError, ValidationFailure
from app.services.gateway import NutritionGateway, get_gateway
from app.services.validation import validate_health_profile

logger = logging.getLogger(__name__)

INVALID_PROFILE_MESSAGE = "Invalid input. Please check your entries and try again."
DIET_PLAN_FAILED_MESSAGE = (
    "Failed to generate diet plan. The AI service may be temporarily unavailable. "
    "Please try again later."
)
SHOPPING_LIST_REQUIRED_MESSAGE = "A diet plan is required to generate a shopping list."
SHOPPING_LIST_FAILED_MESSAGE = "Failed to generate shopping list. Please try again."
RECIPES_REQUIRED_MESSAGE = "A diet plan is required to suggest recipes."
RECIPES_FAILED_MESSAGE = "Failed to suggest recipes. Please try again."
QUESTION_REQUIRED_MESSAGE = "Please enter a question."
CHAT_FAILED_MESSAGE = "The chatbot is currently unavailable. Please try again later."


def serialize_diet_plan(plan: DietPlan) -> str:
    """Render a plan as the text fed to the shopping list and recipe actions."""
    return plan.model_dump_json(by_alias=True, exclude_none=True)


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise EmptyInputError(field_name)
    return value


async def request_diet_plan(
    profile: Any,
    gateway: Optional[NutritionGateway] = None,
) -> ActionResult[DietPlan]:
    """Validate a raw health profile and generate a seven-day plan."""
    validated = validate_health_profile(profile)
    if isinstance(validated, ValidationFailure):
        logger.warning(f"Rejected health profile: {validated}")
        return ActionResult[DietPlan](error=f"{INVALID_PROFILE_MESSAGE} ({validated})")

    try:
        gateway = gateway or get_gateway()
        plan = await gateway.generate_diet_plan(validated)
    except Exception as e:
        logger.error(f"Diet plan generation failed: {e}")
        return ActionResult[DietPlan](error=DIET_PLAN_FAILED_MESSAGE)

    return ActionResult[DietPlan](data=plan)


async def request_shopping_list(
    diet_plan: Any,
    gateway: Optional[NutritionGateway] = None,
) -> ActionResult[ShoppingList]:
    """Generate a categorized shopping list from serialized plan text."""
    try:
        diet_plan = _require_text(diet_plan, "dietPlan")
    except EmptyInputError:
        return ActionResult[ShoppingList](error=SHOPPING_LIST_REQUIRED_MESSAGE)

    try:
        gateway = gateway or get_gateway()
        shopping_list = await gateway.generate_shopping_list(diet_plan)
    except Exception as e:
        logger.error(f"Shopping list generation failed: {e}")
        return ActionResult[ShoppingList](error=SHOPPING_LIST_FAILED_MESSAGE)

    return ActionResult[ShoppingList](data=shopping_list)


async def request_recipes(
    diet_plan: Any,
    gateway: Optional[NutritionGateway] = None,
) -> ActionResult[list[str]]:
    """Suggest recipes for serialized plan text."""
    try:
        diet_plan = _require_text(diet_plan, "dietPlan")
    except EmptyInputError:
        return ActionResult[list[str]](error=RECIPES_REQUIRED_MESSAGE)

    try:
        gateway = gateway or get_gateway()
        recipes = await gateway.suggest_recipes(diet_plan)
    except Exception as e:
        logger.error(f"Recipe suggestion failed: {e}")
        return ActionResult[list[str]](error=RECIPES_FAILED_MESSAGE)

    return ActionResult[list[str]](data=recipes)


async def request_chat_answer(
    question: Any,
    gateway: Optional[NutritionGateway] = None,
) -> ActionResult[str]:
    """Answer one chatbot question. No conversation state is kept."""
    try:
        question = _require_text(question, "question")
    except EmptyInputError:
        return ActionResult[str](error=QUESTION_REQUIRED_MESSAGE)

    try:
        gateway = gateway or get_gateway()
        answer = await gateway.answer_question(question)
    except Exception as e:
        logger.error(f"Chatbot answer failed: {e}")
        return ActionResult[str](error=CHAT_FAILED_MESSAGE)

    return ActionResult[str](data=answer)
