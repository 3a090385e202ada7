from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single bubble in the client chat log."""
    model_config = ConfigDict(populate_by_name=True)

    text: str
    is_user: bool = Field(alias="isUser")
    timestamp: str
    code_language: str | None = Field(default=None, alias="codeLanguage")


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    conversation_history: str | None = Field(
        default=None, alias="conversationHistory"
    )
    is_greeting: bool | None = Field(default=None, alias="isGreeting")


class ChatResponse(BaseModel):
    response: str = Field(description="The AI generated response.")


class SummarizeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_history: str = Field(alias="conversationHistory")


class SummaryResponse(BaseModel):
    summary: str = Field(
        description="A concise summary of the conversation history."
    )


class ErrorResponse(BaseModel):
    error: str
