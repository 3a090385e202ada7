from __future__ import annotations

from datetime import datetime

from app.services.formatting import fence_code, format_timestamp, split_code_block


def test_python_block_is_split_out():
    response = "Here you go:\n```python\nprint('hi')\nx = 1\n```\nEnjoy!"
    assert split_code_block(response) == ("python", "print('hi')\nx = 1")


def test_response_without_fence_is_unchanged():
    response = "Just prose, no code."
    assert split_code_block(response) == (None, response)


def test_fence_without_language():
    assert split_code_block("```\nls -la\n```") == (None, "ls -la")


def test_only_first_block_is_used():
    response = "```js\na()\n```\n```py\nb()\n```"
    assert split_code_block(response) == ("js", "a()")


def test_fence_code_wraps_with_language():
    assert fence_code("a = 1", "python") == "```python\na = 1\n```"


def test_format_timestamp_is_hours_and_minutes():
    assert format_timestamp(datetime(2024, 1, 2, 9, 5)) == "09:05"
