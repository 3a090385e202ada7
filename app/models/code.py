from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CodeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(min_length=1)
    language: str | None = None
    previous_code: str | None = Field(default=None, alias="previousCode")


class CodeResponse(BaseModel):
    code: str = Field(description="The AI generated code.")
