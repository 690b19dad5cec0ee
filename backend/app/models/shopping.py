"""Shopping list Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ShoppingItem(CamelModel):
    """A single item on the shopping list."""

    item: str = Field(description='Name of the item (e.g., "Chicken Breast")')
    quantity: Optional[str] = Field(None, description='Quantity and unit (e.g., "2 lbs")')


class ShoppingCategory(CamelModel):
    """Items grouped under a free-text category label."""

    category: str = Field(description='Category label (e.g., "Produce", "Pantry Staples")')
    items: list[ShoppingItem] = Field(default_factory=list)


class ShoppingList(CamelModel):
    """Categorized shopping list for a whole weekly plan."""

    shopping_list: list[ShoppingCategory] = Field(
        description="A categorized list of shopping items",
    )

    @property
    def items_count(self) -> int:
        return sum(len(category.items) for category in self.shopping_list)
