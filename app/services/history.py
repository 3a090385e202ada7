from __future__ import annotations

_TURN_MARKER = "\nUser: "


def format_exchange(user_text: str, ai_text: str) -> str:
    return f"{_TURN_MARKER}{user_text}\nAI: {ai_text}"


def split_history(text: str, max_chars: int | None) -> tuple[str, str]:
    """Split history into (dropped, kept) so that ``kept`` fits ``max_chars``.

    Whole leading exchanges are dropped. When even the newest exchange is
    larger than the budget, the tail of the text is kept as-is.
    """
    if max_chars is None or len(text) <= max_chars:
        return "", text
    if max_chars <= 0:
        return text, ""

    start = len(text) - max_chars
    cut = text.find(_TURN_MARKER, start)
    if cut == -1:
        cut = start
    return text[:cut], text[cut:]


def truncate_history(text: str, max_chars: int | None) -> str:
    return split_history(text, max_chars)[1]


class ConversationHistory:
    """Accumulates "User: ... / AI: ..." lines in send order."""

    def __init__(self, text: str = "", *, max_chars: int | None = None):
        self._max_chars = max_chars
        self._text = truncate_history(text, max_chars)

    @property
    def text(self) -> str:
        return self._text

    def record(self, user_text: str, ai_text: str) -> None:
        self._text = truncate_history(
            self._text + format_exchange(user_text, ai_text), self._max_chars
        )

    def clear(self) -> None:
        self._text = ""

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text
