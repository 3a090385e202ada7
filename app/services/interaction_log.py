from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class InteractionLogger:
    """Records finished chat exchanges to the application log.

    Nothing is persisted and nothing feeds back into the prompts.
    """

    def __init__(self, *, max_preview_chars: int = 200):
        self._max_preview = max_preview_chars

    def _preview(self, text: str) -> str:
        if len(text) <= self._max_preview:
            return text
        return text[: self._max_preview] + "..."

    def record(self, user_message: str, ai_response: str) -> None:
        try:
            logger.info(
                "Interaction user=%r ai=%r",
                self._preview(user_message),
                self._preview(ai_response),
            )
        except Exception:
            # Logging an exchange must never fail the request that produced it.
            logger.exception("Failed to store interaction")
