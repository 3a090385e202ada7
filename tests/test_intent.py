from __future__ import annotations

import pytest

from app.services.intent import IntentFlags, classify_intent


def test_hello_is_greeting_only():
    flags = classify_intent("hello")
    assert flags.is_greeting is True
    assert flags.creator_inquiry is False


def test_who_created_you_is_creator_inquiry_only():
    flags = classify_intent("who created you")
    assert flags.is_greeting is False
    assert flags.creator_inquiry is True


@pytest.mark.parametrize(
    "message",
    ["Hi", "HELLO there", "hey, what's up", "namaste ji", "kem cho", "sat sri akal"],
)
def test_greetings_match_at_start(message):
    assert classify_intent(message).is_greeting is True


def test_greeting_must_lead_the_message():
    assert classify_intent("say hello to my friend").is_greeting is False
    assert classify_intent("history of the hittites").is_greeting is False


def test_overlapping_matches_set_multiple_flags():
    flags = classify_intent("Hi! who built you?")
    assert flags.is_greeting is True
    assert flags.creator_inquiry is True


def test_hinglish_markers():
    assert classify_intent("bhai ye kya scene hai").is_hinglish is True
    assert classify_intent("tumhara baap kon hai").creator_inquiry is True
    assert classify_intent("please explain photosynthesis").is_hinglish is False


def test_live_data_requests():
    assert classify_intent("show me the latest news about AI").live_data_request is True
    assert classify_intent("live score of the match?").live_data_request is True
    assert classify_intent("what's trending today").live_data_request is True
    assert classify_intent("write a poem about rain").live_data_request is False


def test_plain_message_has_no_flags():
    assert classify_intent("explain recursion in python") == IntentFlags()
