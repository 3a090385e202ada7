from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import Any

import httpx

from app.client.store import ChatStore
from app.core.settings import get_settings
from app.models.chat import ChatMessage
from app.services.file_analysis_service import is_valid_url
from app.services.formatting import format_timestamp, split_code_block
from app.services.history import ConversationHistory
from app.services.intent import classify_intent

logger = logging.getLogger(__name__)

SEND_ERROR_TEXT = "Sorry, I encountered an error processing your request."
ANALYSIS_ERROR_TEXT = "Sorry, I encountered an error analyzing the file."


class ChatSession:
    """Drives one user's conversation against the HTTP API.

    One request is in flight at a time, so the chat log always holds
    messages in send order. Failures never escape ``send``: they are logged
    and an apology bubble is appended instead.
    """

    def __init__(
        self,
        store: ChatStore,
        *,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        history_max_chars: int | None = None,
        timeout: float = 60.0,
    ):
        self._store = store
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url or get_settings().api_base_url, timeout=timeout
        )
        self._history = ConversationHistory(max_chars=history_max_chars)

    @property
    def history(self) -> ConversationHistory:
        return self._history

    @property
    def messages(self) -> list[ChatMessage]:
        return self._store.messages

    def __enter__(self) -> ChatSession:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def reset(self) -> None:
        self._store.clear()
        self._history.clear()

    def _append(self, text: str, *, is_user: bool, code_language: str | None = None) -> ChatMessage:
        message = ChatMessage(
            text=text,
            is_user=is_user,
            timestamp=format_timestamp(),
            code_language=code_language,
        )
        self._store.append(message)
        return message

    @staticmethod
    def _field(response: httpx.Response, key: str) -> str:
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("Expected a JSON object in the response")
        value = payload[key]
        if not isinstance(value, str):
            raise ValueError(f"Expected string in {key!r}")
        return value

    def _post_chat(self, text: str) -> str:
        response = self._client.post(
            "/chat",
            json={
                "message": text,
                "conversationHistory": self._history.text,
                "isGreeting": classify_intent(text).is_greeting,
            },
        )
        return self._field(response, "response")

    def _post_file(self, path: Path, text: str) -> str:
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        with path.open("rb") as fh:
            response = self._client.post(
                "/analyze-file",
                files={"file": (path.name, fh, content_type)},
                data={"message": text},
            )
        return self._field(response, "analysis")

    def send(
        self, text: str, *, file_path: str | os.PathLike[str] | None = None
    ) -> ChatMessage | None:
        path = Path(file_path) if file_path is not None else None
        if not text.strip() and path is None:
            return None

        user_text = text if text.strip() else f"Uploaded {path.name}"
        self._append(user_text, is_user=True)

        try:
            reply = self._post_file(path, text) if path else self._post_chat(text)
        except (httpx.HTTPError, OSError, KeyError, ValueError) as e:
            logger.error("Error during AI interaction: %s", e)
            return self._append(SEND_ERROR_TEXT, is_user=False)

        language, body = split_code_block(reply)
        ai_message = self._append(body, is_user=False, code_language=language)
        self._history.record(user_text, body)
        return ai_message

    def analyze_image_url(self, url: str, message: str = "") -> ChatMessage | None:
        if not is_valid_url(url):
            logger.warning("Invalid URL: %s", url)
            return None

        try:
            response = self._client.post(
                "/analyze-url",
                json={"url": url, "message": message, "fileType": "image"},
            )
            analysis = self._field(response, "analysis")
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error("File analysis failed: %s", e)
            return self._append(ANALYSIS_ERROR_TEXT, is_user=False)

        return self._append(analysis, is_user=False)
