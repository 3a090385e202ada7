from __future__ import annotations

import re
from datetime import datetime

CODE_BLOCK_RE = re.compile(r"```(\w+)?\n([\s\S]*?)\n```")


def split_code_block(text: str) -> tuple[str | None, str]:
    """Return ``(language, body)`` for the first fenced block in ``text``.

    Text without a fence comes back unchanged with no language.
    """
    match = CODE_BLOCK_RE.search(text)
    if match is None:
        return None, text
    return match.group(1) or None, match.group(2)


def fence_code(code: str, language: str) -> str:
    return f"```{language}\n{code}\n```"


def format_timestamp(moment: datetime | None = None) -> str:
    moment = moment or datetime.now()
    return moment.strftime("%H:%M")
