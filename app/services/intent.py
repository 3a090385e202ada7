"""Regex-based intent flags for incoming chat messages.

Each flag is an independent test against the raw message. There is no
normalization, no scoring and no combination logic, so a message such as
"hi, who created you?" sets both ``is_greeting`` and ``creator_inquiry``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


GREETING_RE = re.compile(
    r"^(hi|hello|hey|greetings|namaste|majama|kem cho|kaise ho|sat sri akal)\b",
    re.IGNORECASE,
)

CREATOR_RE = re.compile(
    r"(who created you|who built you|who made you|who is your creator"
    r"|creator|origin|tumhara baap kon hai)",
    re.IGNORECASE,
)

HINGLISH_RE = re.compile(
    r"\b(yaar|bhai|acha|accha|theek hai|kya|kaise|tum|tera|mera|meraa|muje"
    r"|mujhe|woh|hai|nahi|kyun|haan)\b",
    re.IGNORECASE,
)

LIVE_DATA_RE = re.compile(
    r"\b(live|latest|current|today'?s|trending|breaking|recent)\s+"
    r"(news|scores?|updates?|weather|prices?|headlines?|topics?|events?|matches?)\b"
    r"|\bwhat'?s\s+trending\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class IntentFlags:
    is_greeting: bool = False
    creator_inquiry: bool = False
    is_hinglish: bool = False
    live_data_request: bool = False


def classify_intent(message: str) -> IntentFlags:
    return IntentFlags(
        is_greeting=bool(GREETING_RE.search(message)),
        creator_inquiry=bool(CREATOR_RE.search(message)),
        is_hinglish=bool(HINGLISH_RE.search(message)),
        live_data_request=bool(LIVE_DATA_RE.search(message)),
    )
