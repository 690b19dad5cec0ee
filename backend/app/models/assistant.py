"""Recipe suggestion and chatbot Pydantic models."""

from pydantic import Field

from .base import CamelModel


class RecipeSuggestions(CamelModel):
    """Recipes suggested for a diet plan."""

    recipes: list[str] = Field(description="Recipe descriptions consistent with the plan")


class ChatAnswer(CamelModel):
    answer: str = Field(description="The chatbot's answer to the user's question")
