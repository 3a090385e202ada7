from __future__ import annotations

from app.core.settings import Settings, get_settings
from app.models.code import CodeResponse
from app.services.formatting import fence_code, split_code_block
from app.services.gemini_service import GeminiService
from app.services.prompts import build_code_prompt


class CodeService:
    def __init__(self, gemini_service: GeminiService, settings: Settings | None = None):
        self._gemini = gemini_service
        self._settings = settings or get_settings()

    async def generate(
        self,
        prompt: str,
        language: str | None = None,
        previous_code: str | None = None,
    ) -> CodeResponse:
        language = (language or "").strip() or self._settings.default_code_language

        output = await self._gemini.generate_structured(
            build_code_prompt(prompt, language, previous_code), CodeResponse
        )

        # The model sometimes fences its answer anyway.
        _, code = split_code_block(output.code.strip())
        return CodeResponse(code=fence_code(code, language))
