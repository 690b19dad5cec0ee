"""Uniform result returned by every action."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ActionResult(BaseModel, Generic[T]):
    """Exactly one of ``data`` or ``error``."""

    data: Optional[T] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("ActionResult needs exactly one of data or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
