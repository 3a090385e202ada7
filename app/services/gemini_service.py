from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel

from app.core.settings import Settings, get_settings
from app.services.tool_runner import ToolRunner

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class GeminiService:
    """Thin wrapper over the google-genai client.

    Every prompt declares its output shape as a pydantic model; the provider
    is asked for JSON matching that schema and the reply is validated back
    into the model. Nothing is retried: failures are logged and re-raised.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

        if not self._settings.gemini_api_key:
            raise RuntimeError("GEMINI_API_KEY is not configured")

        self._client = genai.Client(api_key=self._settings.gemini_api_key)

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    async def _generate(
        self,
        contents: list[types.Content],
        config: types.GenerateContentConfig | None = None,
    ) -> types.GenerateContentResponse:
        try:
            return await asyncio.to_thread(
                self._client.models.generate_content,
                model=self._settings.gemini_model,
                contents=contents,
                config=config,
            )
        except Exception:
            logger.exception("Gemini request failed")
            raise

    async def generate_structured(
        self,
        prompt: str,
        output_model: type[OutputT],
        *,
        attachments: list[types.Part] | None = None,
    ) -> OutputT:
        contents = [
            types.Content(
                role="user",
                parts=[types.Part.from_text(text=prompt), *(attachments or [])],
            )
        ]
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=output_model,
        )

        response = await self._generate(contents, config)

        parsed = getattr(response, "parsed", None)
        if isinstance(parsed, output_model):
            return parsed

        text = getattr(response, "text", None) or ""
        logger.debug("Structured output not pre-parsed; validating raw text")
        return output_model.model_validate_json(text)

    async def generate_with_tools(
        self,
        prompt: str,
        runner: ToolRunner,
        *,
        max_tool_steps: int | None = None,
    ) -> str:
        max_steps = max_tool_steps or self._settings.max_tool_steps
        contents: list[types.Content] = [
            types.Content(role="user", parts=[types.Part.from_text(text=prompt)])
        ]
        config = runner.registry.generation_config()

        for step in range(max_steps):
            response = await self._generate(contents, config)

            candidates = response.candidates or []
            if not candidates or candidates[0].content is None:
                raise RuntimeError("Gemini returned no candidates")

            content = candidates[0].content
            contents.append(content)

            parts = content.parts or []
            calls = [p.function_call for p in parts if p.function_call is not None]

            if not calls:
                text_parts = [p.text for p in parts if p.text]
                return "".join(text_parts) if text_parts else "No response generated."

            responses: list[types.Part] = []
            for call in calls:
                logger.info("Step %d: calling tool %s", step + 1, call.name)
                result = await asyncio.to_thread(
                    runner.run, name=call.name or "", args=call.args
                )
                responses.append(
                    types.Part.from_function_response(name=call.name, response=result)
                )
            contents.append(types.Content(role="user", parts=responses))

        logger.warning("Tool loop stopped after %d steps without a final answer", max_steps)
        return "Max tool steps reached. I could not find a final answer."
