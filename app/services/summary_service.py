from __future__ import annotations

import logging

from app.models.chat import SummaryResponse
from app.services.gemini_service import GeminiService
from app.services.prompts import build_summary_prompt

logger = logging.getLogger(__name__)


class SummaryService:
    def __init__(self, gemini_service: GeminiService):
        self._gemini = gemini_service

    async def summarize(self, conversation_history: str) -> SummaryResponse:
        if not conversation_history.strip():
            return SummaryResponse(summary="")

        logger.debug("Summarizing %d chars of history", len(conversation_history))
        return await self._gemini.generate_structured(
            build_summary_prompt(conversation_history), SummaryResponse
        )
