"""
Generation gateway.

Composes the instruction for each use case, makes exactly one call to the
generation service, and only returns output that passes its contract.
Any failure surfaces as GenerationFailure. No retries, no caching.
"""

import logging
from functools import lru_cache
from typing import TypeVar

from pydantic import BaseModel

from app.config import get_settings
from app.models.assistant import ChatAnswer, RecipeSuggestions
from app.models.diet_plan import DietPlan
from app.models.profile import HealthProfile
from app.models.shopping import ShoppingList
from app.services import prompts
from app.services.errors import GenerationFailure, ValidationFailure
from app.services.generation import GenerationService, OpenAIGenerationService
from app.services.validation import validate_shape

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class NutritionGateway:
    """Typed generation calls for diet plans, shopping lists, recipes and chat."""

    def __init__(
        self,
        service: GenerationService,
        chat_service: GenerationService | None = None,
    ):
        self.service = service
        self.chat_service = chat_service or service

    async def generate_diet_plan(self, profile: HealthProfile) -> DietPlan:
        """Generate a seven-day plan for a validated profile."""
        instruction = prompts.build_diet_plan_instruction(profile)
        plan = await self._generate("diet_plan", self.service, instruction, DietPlan)

        total = plan.macronutrient_distribution.total
        if abs(total - 100) > 1:
            logger.warning(f"Macronutrient distribution totals {total:g}%, expected 100%")
        return plan

    async def generate_shopping_list(self, diet_plan: str) -> ShoppingList:
        """Consolidate a serialized plan's ingredients into a categorized list."""
        instruction = prompts.build_shopping_list_instruction(diet_plan)
        return await self._generate("shopping_list", self.service, instruction, ShoppingList)

    async def suggest_recipes(self, diet_plan: str) -> list[str]:
        instruction = prompts.build_recipes_instruction(diet_plan)
        result = await self._generate("recipes", self.service, instruction, RecipeSuggestions)
        return result.recipes

    async def answer_question(self, question: str) -> str:
        instruction = prompts.build_chat_instruction(question)
        result = await self._generate("chat", self.chat_service, instruction, ChatAnswer)
        return result.answer

    async def _generate(
        self,
        use_case: str,
        service: GenerationService,
        instruction: str,
        output_schema: type[M],
    ) -> M:
        logger.info(f"Requesting {use_case} generation ({len(instruction)} char instruction)")
        try:
            output = await service.generate(instruction, output_schema)
        except Exception as e:
            raise GenerationFailure(use_case, f"{type(e).__name__}: {e}", cause=e) from e

        # services may return dicts or model_construct() instances
        result = validate_shape(output_schema, output)
        if isinstance(result, ValidationFailure):
            logger.warning(f"{use_case} output did not match {output_schema.__name__}: {result}")
            raise GenerationFailure(use_case, f"output did not match contract: {result}")
        return result


@lru_cache
def get_gateway() -> NutritionGateway:
    """Get cached gateway backed by OpenAI."""
    settings = get_settings()
    return NutritionGateway(
        service=OpenAIGenerationService(settings),
        chat_service=OpenAIGenerationService(
            settings,
            model=settings.openai_chat_model,
            temperature=settings.chat_temperature,
        ),
    )
