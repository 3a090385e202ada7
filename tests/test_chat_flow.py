from __future__ import annotations

import logging

import pytest

from app.services.chat_flow import ChatFlowService
from app.services.interaction_log import InteractionLogger

pytestmark = pytest.mark.anyio


async def test_respond_returns_structured_reply(settings, fake_gemini):
    fake_gemini.replies["response"] = "Sure!"
    flow = ChatFlowService(fake_gemini, settings=settings)

    result = await flow.respond("explain recursion")

    assert result.response == "Sure!"
    assert "User: explain recursion" in fake_gemini.prompts[0]


async def test_search_disabled_never_uses_tools(settings, fake_gemini):
    settings.enable_search_tool = False
    flow = ChatFlowService(fake_gemini, settings=settings)

    await flow.respond("latest news please")

    assert fake_gemini.tool_prompts == []
    assert len(fake_gemini.prompts) == 1


async def test_truncate_policy_drops_old_exchanges(settings, fake_gemini):
    settings.history_max_chars = 20
    flow = ChatFlowService(fake_gemini, settings=settings)

    await flow.respond("next", "\nUser: ancient question\nAI: ancient answer\nUser: Q\nAI: A")

    assert len(fake_gemini.prompts) == 1
    assert "ancient" not in fake_gemini.prompts[0]
    assert "User: Q\nAI: A" in fake_gemini.prompts[0]


async def test_summarize_policy_replaces_dropped_history(settings, fake_gemini):
    settings.history_max_chars = 20
    settings.history_policy = "summarize"
    fake_gemini.replies["summary"] = "They discussed antiques."
    flow = ChatFlowService(fake_gemini, settings=settings)

    await flow.respond("next", "\nUser: ancient question\nAI: ancient answer\nUser: Q\nAI: A")

    summary_prompt, chat_prompt = fake_gemini.prompts
    assert "ancient question" in summary_prompt
    assert "Summary of earlier conversation: They discussed antiques." in chat_prompt
    assert "ancient question" not in chat_prompt
    assert "User: Q\nAI: A" in chat_prompt


async def test_interactions_are_logged(settings, fake_gemini, caplog):
    fake_gemini.replies["response"] = "pong"
    flow = ChatFlowService(fake_gemini, settings=settings, interaction_logger=InteractionLogger())

    with caplog.at_level(logging.INFO, logger="app.services.interaction_log"):
        await flow.respond("ping")

    assert any("pong" in r.getMessage() for r in caplog.records)


async def test_provider_errors_propagate(settings, fake_gemini):
    fake_gemini.error = RuntimeError("down")
    flow = ChatFlowService(fake_gemini, settings=settings)

    with pytest.raises(RuntimeError, match="down"):
        await flow.respond("hi")
