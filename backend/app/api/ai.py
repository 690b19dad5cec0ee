"""AI endpoints - diet plan, shopping list, recipes, chatbot, day view."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from app.models.base import CamelModel
from app.models.diet_plan import DailyPlan, DietPlan
from app.models.results import ActionResult
from app.models.shopping import ShoppingList
from app.services import actions
from app.services.gateway import NutritionGateway, get_gateway
from app.services.plan_views import DAY_NOT_FOUND_MESSAGE, find_day

router = APIRouter()


# ============================================================================
# Request Models
# ============================================================================

class DietPlanTextRequest(CamelModel):
    """A generated plan serialized as text."""
    diet_plan: Optional[str] = None


class ChatRequest(CamelModel):
    """A single chatbot question."""
    question: Optional[str] = None


# ============================================================================
# Endpoints
# ============================================================================

@router.post(
    "/diet-plan",
    response_model=ActionResult[DietPlan],
    response_model_exclude_none=True,
)
async def generate_diet_plan(
    body: Any = Body(None),
    gateway: NutritionGateway = Depends(get_gateway),
):
    """Generate a seven-day diet plan from a health profile.

    The profile is validated here rather than by FastAPI so the caller gets
    the same ``{data} | {error}`` body for invalid input.
    """
    return await actions.request_diet_plan(body, gateway=gateway)


@router.post(
    "/shopping-list",
    response_model=ActionResult[ShoppingList],
    response_model_exclude_none=True,
)
async def generate_shopping_list(
    body: DietPlanTextRequest,
    gateway: NutritionGateway = Depends(get_gateway),
):
    """Generate a categorized shopping list for a plan."""
    return await actions.request_shopping_list(body.diet_plan, gateway=gateway)


@router.post(
    "/recipes",
    response_model=ActionResult[list[str]],
    response_model_exclude_none=True,
)
async def suggest_recipes(
    body: DietPlanTextRequest,
    gateway: NutritionGateway = Depends(get_gateway),
):
    """Suggest recipes for a plan."""
    return await actions.request_recipes(body.diet_plan, gateway=gateway)


@router.post(
    "/chat",
    response_model=ActionResult[str],
    response_model_exclude_none=True,
)
async def ask_chatbot(
    body: ChatRequest,
    gateway: NutritionGateway = Depends(get_gateway),
):
    """Answer one question about nutrition or the app."""
    return await actions.request_chat_answer(body.question, gateway=gateway)


@router.post("/plan/days/{day}", response_model=DailyPlan, response_model_exclude_none=True)
async def get_plan_day(day: str, plan: DietPlan):
    """Return one day of a plan the caller is holding."""
    entry = find_day(plan, day)
    if entry is None:
        raise HTTPException(status_code=404, detail=DAY_NOT_FOUND_MESSAGE)
    return entry
