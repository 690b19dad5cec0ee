"""
Validation entry points for every request and response shape.

Each validator returns either the parsed model or a ValidationFailure that
lists every violated field. Invalid data never raises past this module.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.models.assistant import ChatAnswer, RecipeSuggestions
from app.models.diet_plan import DietPlan
from app.models.profile import HealthProfile
from app.models.shopping import ShoppingList
from app.services.errors import FieldIssue, ValidationFailure

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_BMI_NOT_A_NUMBER = "BMI must be a number."
_AGE_NOT_A_NUMBER = "Age must be a number."
_HISTORY_TOO_SHORT = 'Please provide some information about your medical history (or "None").'

# (wire field, pydantic error type) -> user-facing message
PROFILE_MESSAGES: dict[tuple[str, str], str] = {
    ("bmi", "missing"): _BMI_NOT_A_NUMBER,
    ("bmi", "float_parsing"): _BMI_NOT_A_NUMBER,
    ("bmi", "float_type"): _BMI_NOT_A_NUMBER,
    ("bmi", "finite_number"): _BMI_NOT_A_NUMBER,
    ("bmi", "greater_than_equal"): "BMI seems too low. Please check the value.",
    ("bmi", "less_than_equal"): "BMI seems too high. Please check the value.",
    ("age", "missing"): _AGE_NOT_A_NUMBER,
    ("age", "int_parsing"): _AGE_NOT_A_NUMBER,
    ("age", "int_type"): _AGE_NOT_A_NUMBER,
    ("age", "int_from_float"): "Age must be a whole number.",
    ("age", "greater_than_equal"): "You must be at least 12 years old.",
    ("age", "less_than_equal"): "Age seems too high. Please check the value.",
    ("medicalHistory", "missing"): _HISTORY_TOO_SHORT,
    ("medicalHistory", "string_too_short"): _HISTORY_TOO_SHORT,
    ("medicalHistory", "string_type"): "Medical history must be text.",
    ("medicalHistory", "string_too_long"): "Medical history is too long.",
    ("dietaryPreferences", "string_type"): "Dietary preferences must be text.",
    ("dietaryPreferences", "string_too_long"): "Dietary preferences are too long.",
}


def _wire_name(model: type[BaseModel], loc: tuple) -> str:
    """Dotted camelCase path for an error location."""
    parts = []
    for part in loc:
        if isinstance(part, str) and part in model.model_fields:
            part = model.model_fields[part].alias or part
        parts.append(str(part))
    return ".".join(parts)


def failure_from_error(
    model: type[BaseModel],
    exc: ValidationError,
    messages: dict[tuple[str, str], str] | None = None,
) -> ValidationFailure:
    """Convert a pydantic ValidationError into a ValidationFailure."""
    messages = messages or {}
    issues = []
    for error in exc.errors():
        path = _wire_name(model, error["loc"])
        message = messages.get((path, error["type"]), error["msg"])
        issues.append(FieldIssue(field=path, message=message))
    return ValidationFailure(issues=issues)


def validate_shape(
    model: type[M],
    raw: Any,
    messages: dict[tuple[str, str], str] | None = None,
) -> M | ValidationFailure:
    """Validate raw input (dict, model instance or JSON text) against a model."""
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return model.model_validate_json(raw)
        if isinstance(raw, BaseModel):
            raw = raw.model_dump()
        return model.model_validate(raw)
    except ValidationError as e:
        failure = failure_from_error(model, e, messages)
        logger.debug(f"{model.__name__} failed validation: {failure}")
        return failure


def validate_health_profile(raw: Any) -> HealthProfile | ValidationFailure:
    """Validate a submitted health profile, coercing numeric strings."""
    return validate_shape(HealthProfile, raw, PROFILE_MESSAGES)


def validate_diet_plan(raw: Any) -> DietPlan | ValidationFailure:
    return validate_shape(DietPlan, raw)


def validate_shopping_list(raw: Any) -> ShoppingList | ValidationFailure:
    return validate_shape(ShoppingList, raw)


def validate_recipes(raw: Any) -> RecipeSuggestions | ValidationFailure:
    return validate_shape(RecipeSuggestions, raw)


def validate_chat_answer(raw: Any) -> ChatAnswer | ValidationFailure:
    return validate_shape(ChatAnswer, raw)
