"""Error types for the generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FieldIssue:
    """One violated constraint on one input field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message


@dataclass
class ValidationFailure:
    """Structured result of a failed validation. Returned, not raised."""

    issues: list[FieldIssue] = field(default_factory=list)

    @property
    def fields(self) -> list[str]:
        return [issue.field for issue in self.issues]

    def message_for(self, field_name: str) -> str | None:
        for issue in self.issues:
            if issue.field == field_name:
                return issue.message
        return None

    def __str__(self) -> str:
        return "; ".join(str(issue) for issue in self.issues)


class EmptyInputError(ValueError):
    """A required text input was missing or blank."""

    def __init__(self, field_name: str):
        super().__init__(f"{field_name} is required")
        self.field_name = field_name


class GenerationFailure(Exception):
    """The generation service failed or returned output not matching its contract."""

    def __init__(self, use_case: str, reason: str, cause: Exception | None = None):
        super().__init__(f"{use_case} generation failed: {reason}")
        self.use_case = use_case
        self.reason = reason
        self.cause = cause
