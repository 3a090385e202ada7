from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CREATOR_DETAILS = (
    "Created by Jishnu Chauhan, an enthusiastic AI engineer from Dr. Akhilesh "
    "Das Gupta Institute of Professional Studies, B.Tech AIML."
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="OpenChat Backend", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "gemini_api_key"),
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    assistant_name: str = Field(default="OpenChat", alias="ASSISTANT_NAME")
    creator_details: str = Field(
        default=DEFAULT_CREATOR_DETAILS, alias="CREATOR_DETAILS"
    )

    # Prompt history budget, in characters of "\nUser: ...\nAI: ..." text.
    history_max_chars: int = Field(default=8000, ge=0, alias="HISTORY_MAX_CHARS")
    history_policy: Literal["truncate", "summarize"] = Field(
        default="truncate", alias="HISTORY_POLICY"
    )

    enable_search_tool: bool = Field(default=True, alias="ENABLE_SEARCH_TOOL")
    search_stub_delay: float = Field(default=1.0, ge=0, alias="SEARCH_STUB_DELAY")
    max_tool_steps: int = Field(default=4, ge=1, alias="MAX_TOOL_STEPS")

    allowed_upload_types: list[str] = Field(
        default_factory=lambda: [
            "image/jpeg",
            "image/png",
            "application/pdf",
            "text/plain",
        ],
        alias="ALLOWED_UPLOAD_TYPES",
    )
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")

    default_code_language: str = Field(
        default="javascript", alias="DEFAULT_CODE_LANGUAGE"
    )

    client_store_path: str = Field(
        default=".openchat/chat_store.json", alias="CLIENT_STORE_PATH"
    )
    client_inactive_timeout: float = Field(
        default=10 * 60, alias="CLIENT_INACTIVE_TIMEOUT"
    )
    api_base_url: str = Field(
        default="http://localhost:8000/api/v1", alias="API_BASE_URL"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
