from __future__ import annotations

import pytest

from app.core.settings import Settings


class FakeGeminiService:
    """Records prompts and answers from a canned payload per output model."""

    def __init__(self, replies: dict[str, str] | None = None, error: Exception | None = None):
        self.replies = replies or {}
        self.error = error
        self.prompts: list[str] = []
        self.attachments: list[list] = []
        self.tool_prompts: list[str] = []

    async def generate_structured(self, prompt, output_model, *, attachments=None):
        self.prompts.append(prompt)
        self.attachments.append(list(attachments or []))
        if self.error is not None:
            raise self.error
        field = next(iter(output_model.model_fields))
        return output_model(**{field: self.replies.get(field, f"{field}:ok")})

    async def generate_with_tools(self, prompt, runner, *, max_tool_steps=None):
        self.tool_prompts.append(prompt)
        if self.error is not None:
            raise self.error
        result = runner.run(name="search_web", args={"query": "latest news"})
        return f"searched:{result['ok']}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="test-key",
        search_stub_delay=0,
        history_max_chars=8000,
    )


@pytest.fixture
def fake_gemini() -> FakeGeminiService:
    return FakeGeminiService()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
