"""JSON-file backed client state: the chat log and the theme preference.

The store has an explicit lifecycle. ``load()`` reads the file (dropping a
stale chat log), every mutation is mirrored back with ``save()``, and the
store can be used as a context manager that loads on enter and saves on
exit.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Callable, Literal

from pydantic import TypeAdapter, ValidationError

from app.models.chat import ChatMessage

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark", "system"]

CHAT_LOG_KEY = "chatLog"
THEME_KEY = "theme"
LAST_ACTIVE_KEY = "lastActive"

_chat_log_adapter = TypeAdapter(list[ChatMessage])


class ChatStore:
    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        inactive_timeout: float | None = 10 * 60,
        clock: Callable[[], float] = time.time,
    ):
        self._path = Path(path)
        self._inactive_timeout = inactive_timeout
        self._clock = clock
        self._messages: list[ChatMessage] = []
        self._theme: Theme = "system"
        self._last_active: float | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    @property
    def theme(self) -> Theme:
        return self._theme

    def __enter__(self) -> ChatStore:
        self.load()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.save()

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read chat store %s; starting fresh", self._path, exc_info=True)
            return {}
        return raw if isinstance(raw, dict) else {}

    def load(self) -> None:
        data = self._read()

        theme = data.get(THEME_KEY)
        self._theme = theme if theme in ("light", "dark", "system") else "system"

        last_active = data.get(LAST_ACTIVE_KEY)
        self._last_active = float(last_active) if isinstance(last_active, (int, float)) else None

        try:
            self._messages = _chat_log_adapter.validate_python(data.get(CHAT_LOG_KEY) or [])
        except ValidationError:
            logger.warning("Discarding malformed chat log in %s", self._path)
            self._messages = []

        if self._is_stale():
            logger.info("Chat log inactive for too long; clearing")
            self._messages = []

    def _is_stale(self) -> bool:
        if self._inactive_timeout is None or self._last_active is None:
            return False
        return self._clock() - self._last_active > self._inactive_timeout

    def save(self) -> None:
        payload = {
            CHAT_LOG_KEY: [m.model_dump(by_alias=True) for m in self._messages],
            THEME_KEY: self._theme,
            LAST_ACTIVE_KEY: self._last_active,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=self._path.name, suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)
        self._last_active = self._clock()
        self.save()

    def clear(self) -> None:
        self._messages = []
        self.save()

    def set_theme(self, theme: Theme) -> None:
        if theme not in ("light", "dark", "system"):
            raise ValueError(f"Unknown theme: {theme}")
        self._theme = theme
        self.save()

    def toggle_theme(self) -> Theme:
        self.set_theme("dark" if self._theme == "light" else "light")
        return self._theme
