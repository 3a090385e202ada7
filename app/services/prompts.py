"""Prompt templates for every flow.

The chat prompt is a single template assembled from fragments; which
fragments are included is decided by :class:`PromptOptions`. All value
substitution goes through ``PromptTemplate`` so user text is never parsed
as template syntax.
"""

from __future__ import annotations

from dataclasses import dataclass

from langchain_core.prompts import PromptTemplate

from app.core.settings import Settings, get_settings
from app.services.history import truncate_history
from app.services.intent import IntentFlags


_PERSONA = (
    "You are {assistant_name}, an AI assistant designed to provide helpful and "
    "informative responses. Focus on conciseness and relevance."
)

_GREETING = (
    "The user opened with a greeting. Greet them back warmly, for example: "
    "\"Hi there! {assistant_name} here 👋 How can I assist you today? I'm ready "
    "to answer your questions, provide information, or help in any way I can.\""
)

_HINGLISH_GREETING = (
    "The user writes in Hinglish. Reply in Hinglish with a bit of bro-code, "
    "for example: \"Kya haal hai dost! {assistant_name} is here. Bol kya help "
    "chahiye tujhe? 😎\""
)

_HISTORY = "Conversation History:\n{conversation_history}"

_CREATOR = (
    "The user is asking about your origin. Answer with these creator details "
    "(in Hinglish if the user wrote in Hinglish):\n{creator_details}"
)

_LIVE_SEARCH = (
    "The user is asking for live information such as news, trending topics or "
    "scores. Call the search_web tool to fetch current information, then be "
    "elaborate and descriptive and include links."
)

_USER = "User: {message}"

_INSTRUCTIONS = (
    "AI: Okay, let's think step by step. Your response should be natural, "
    "engaging, and sound like a human. Give key points line by line. Use "
    "Markdown formatting to structure your response with headings, bullet "
    "points, and code blocks where appropriate. Refrain from answering in code "
    "formats unless explicitly asked. Include friendly emojis.\n"
    "If the user writes in any other language, respond in the same language.\n"
    "If the user asks about any URL or link, provide it."
)


@dataclass(frozen=True)
class PromptOptions:
    greeting: bool = False
    hinglish: bool = False
    creator_details: bool = False
    live_search: bool = False

    @classmethod
    def from_flags(cls, flags: IntentFlags, *, search_enabled: bool) -> PromptOptions:
        return cls(
            greeting=flags.is_greeting,
            hinglish=flags.is_hinglish,
            creator_details=flags.creator_inquiry,
            live_search=search_enabled and flags.live_data_request,
        )

    def fragments(self, *, has_history: bool) -> list[str]:
        parts = [_PERSONA]
        if self.greeting:
            parts.append(_GREETING)
        elif self.hinglish:
            parts.append(_HINGLISH_GREETING)
        if has_history:
            parts.append(_HISTORY)
        if self.creator_details:
            parts.append(_CREATOR)
        if self.live_search:
            parts.append(_LIVE_SEARCH)
        parts.append(_USER)
        parts.append(_INSTRUCTIONS)
        return parts


def build_chat_prompt(
    message: str,
    conversation_history: str | None,
    options: PromptOptions,
    settings: Settings | None = None,
    *,
    truncate: bool = True,
) -> str:
    settings = settings or get_settings()
    history = conversation_history or ""
    if truncate:
        history = truncate_history(history, settings.history_max_chars)

    template = PromptTemplate.from_template(
        "\n\n".join(options.fragments(has_history=bool(history.strip())))
    )
    return template.format(
        assistant_name=settings.assistant_name,
        conversation_history=history.strip("\n"),
        creator_details=settings.creator_details,
        message=message,
    )


_FILE_ANALYSIS_PROMPT = PromptTemplate.from_template(
    """You are an expert AI assistant specialized in analyzing various types of files.
You will receive a file (attached, inlined or referenced by URL) and its type, and your task is to provide a detailed and relevant analysis.
Ensure your analysis is tailored to the file type. Provide key insights and relevant information.
Present the analysis in a clear, concise, and human-readable format, focusing on the most important aspects.

Here are some examples on how to analyze files:
- Images: Identify objects, people, scenes, and provide a description of the visual content.
- PDF: Summarize the document, extract key information, and identify the main topics.
- Text files: Analyze the text, identify the main themes, and extract relevant data.

{file_reference}
File Type: {file_type}
{user_request}
AI:"""
)


def build_file_analysis_prompt(
    *,
    file_type: str,
    file_name: str | None = None,
    file_url: str | None = None,
    message: str | None = None,
    file_text: str | None = None,
) -> str:
    reference: list[str] = []
    if file_url:
        reference.append(f"File URL: {file_url}")
    if file_name:
        reference.append(f"File Name: {file_name}")
    if file_text is not None:
        reference.append(f"File Content:\n{file_text}")

    user_request = f"User Request: {message}\n" if message and message.strip() else ""

    return _FILE_ANALYSIS_PROMPT.format(
        file_reference="\n".join(reference),
        file_type=file_type,
        user_request=user_request,
    )


_CODE_PROMPT = PromptTemplate.from_template(
    """You are a code generation AI. You will be given a prompt that describes the code to generate, and the language to use. If previous code is provided, integrate the new code seamlessly with the old code. Respond with the code only, without any other information and without Markdown fences.
{previous_code_section}
Prompt: {prompt}
Language: {language}

AI:"""
)


def build_code_prompt(prompt: str, language: str, previous_code: str | None = None) -> str:
    previous = ""
    if previous_code and previous_code.strip():
        previous = (
            "\nPrevious Code:\n"
            f"{previous_code}\n\n"
            "Now, integrate this code with the new functionality described in the prompt.\n"
        )
    return _CODE_PROMPT.format(
        previous_code_section=previous, prompt=prompt, language=language
    )


_SUMMARY_PROMPT = PromptTemplate.from_template(
    "Summarize the following conversation history in a concise manner:\n\n"
    "{conversation_history}"
)


def build_summary_prompt(conversation_history: str) -> str:
    return _SUMMARY_PROMPT.format(conversation_history=conversation_history)
