"""Generation service - OpenAI integration for schema-shaped output."""

import json
import logging
from typing import Protocol, TypeVar

from openai import AsyncOpenAI
from pydantic import BaseModel

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class GenerationService(Protocol):
    """Anything that turns an instruction into an instance of ``output_schema``."""

    async def generate(self, instruction: str, output_schema: type[M]) -> M: ...


class GenerationNotConfigured(RuntimeError):
    """No API key is configured for the generation service."""


class OpenAIGenerationService:
    """OpenAI-powered generation constrained to a pydantic model's JSON schema."""

    def __init__(
        self,
        settings: Settings | None = None,
        model: str | None = None,
        temperature: float | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.settings = settings or get_settings()
        self.model = model or self.settings.openai_model
        self.temperature = (
            temperature if temperature is not None else self.settings.generation_temperature
        )
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.settings.openai_api_key:
                raise GenerationNotConfigured("OPENAI_API_KEY is not set")
            self._client = AsyncOpenAI(api_key=self.settings.openai_api_key)
        return self._client

    async def generate(self, instruction: str, output_schema: type[M]) -> M:
        """Run one completion and parse the reply into ``output_schema``.

        Raises pydantic.ValidationError when the reply does not match the schema,
        and openai errors (including timeouts) unchanged.
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": self._build_system_prompt(output_schema)},
                {"role": "user", "content": instruction},
            ],
            temperature=self.temperature,
            response_format={"type": "json_object"},
            timeout=self.settings.generation_timeout_seconds,
        )

        content = response.choices[0].message.content or "{}"
        logger.debug(f"{output_schema.__name__} reply from {self.model}: {len(content)} chars")
        return output_schema.model_validate_json(content)

    def _build_system_prompt(self, output_schema: type[BaseModel]) -> str:
        schema = json.dumps(output_schema.model_json_schema(by_alias=True), indent=2)
        return f"""Follow the user's instructions exactly.

Return JSON only, matching this JSON schema:
{schema}

Use the exact property names from the schema. Do not wrap the JSON in markdown."""
