from __future__ import annotations

import dataclasses
import logging

from app.core.settings import Settings, get_settings
from app.models.chat import ChatResponse
from app.services.gemini_service import GeminiService
from app.services.history import split_history
from app.services.intent import classify_intent
from app.services.interaction_log import InteractionLogger
from app.services.prompts import PromptOptions, build_chat_prompt
from app.services.summary_service import SummaryService
from app.services.tool_runner import ToolRunner
from app.services.tooling import ToolRegistry
from app.services.tools_search import make_web_search_tool

logger = logging.getLogger(__name__)


class ChatFlowService:
    """The chat flow: classify, apply the history policy, prompt, call Gemini."""

    def __init__(
        self,
        gemini_service: GeminiService,
        *,
        settings: Settings | None = None,
        summary_service: SummaryService | None = None,
        interaction_logger: InteractionLogger | None = None,
        tool_runner: ToolRunner | None = None,
    ):
        self._gemini = gemini_service
        self._settings = settings or get_settings()
        self._summary = summary_service or SummaryService(gemini_service)
        self._interactions = interaction_logger or InteractionLogger()
        self._tools = tool_runner or ToolRunner(
            ToolRegistry(
                [make_web_search_tool(delay_seconds=self._settings.search_stub_delay)]
            )
        )

    async def _prepare_history(self, conversation_history: str | None) -> str:
        history = conversation_history or ""
        dropped, kept = split_history(history, self._settings.history_max_chars)
        if not dropped:
            return kept

        if self._settings.history_policy == "summarize":
            summary = await self._summary.summarize(dropped)
            logger.info("Summarized %d chars of older history", len(dropped))
            return f"Summary of earlier conversation: {summary.summary}{kept}"

        logger.info("Dropped %d chars of older history", len(dropped))
        return kept

    async def respond(
        self,
        message: str,
        conversation_history: str | None = None,
        *,
        is_greeting: bool | None = None,
    ) -> ChatResponse:
        flags = classify_intent(message)
        if is_greeting and not flags.is_greeting:
            flags = dataclasses.replace(flags, is_greeting=True)

        options = PromptOptions.from_flags(
            flags, search_enabled=self._settings.enable_search_tool
        )
        history = await self._prepare_history(conversation_history)
        prompt = build_chat_prompt(
            message, history, options, self._settings, truncate=False
        )

        logger.debug("Chat flow options: %s", options)
        if options.live_search:
            text = await self._gemini.generate_with_tools(prompt, self._tools)
            result = ChatResponse(response=text)
        else:
            result = await self._gemini.generate_structured(prompt, ChatResponse)

        self._interactions.record(message, result.response)
        return result
