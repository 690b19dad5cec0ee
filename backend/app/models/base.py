"""Shared base for models exchanged with the web frontend."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model whose wire names are camelCase (``weeklyPlan``, ``dailyTotal``).

    Python code uses snake_case attribute names; either form is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
