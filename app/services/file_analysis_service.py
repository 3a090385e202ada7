from __future__ import annotations

import logging
from urllib.parse import urlparse

from google.genai import types

from app.core.settings import Settings, get_settings
from app.models.analysis import AnalysisResponse
from app.services.gemini_service import GeminiService
from app.services.prompts import build_file_analysis_prompt

logger = logging.getLogger(__name__)


class UnsupportedFileTypeError(ValueError):
    def __init__(self, content_type: str | None):
        super().__init__("Unsupported file type")
        self.content_type = content_type


class EmptyUploadError(ValueError):
    def __init__(self):
        super().__init__("Uploaded file is empty")


class FileTooLargeError(ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"File too large: {size} bytes (limit {limit})")
        self.size = size
        self.limit = limit


class InvalidUrlError(ValueError):
    def __init__(self, url: str):
        super().__init__("Invalid URL")
        self.url = url


def base_media_type(content_type: str | None) -> str | None:
    """Strip parameters such as "; charset=utf-8" from a Content-Type value."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None


def is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


class FileAnalysisService:
    def __init__(self, gemini_service: GeminiService, settings: Settings | None = None):
        self._gemini = gemini_service
        self._settings = settings or get_settings()

    @property
    def max_upload_bytes(self) -> int:
        return self._settings.max_upload_bytes

    def is_supported(self, content_type: str | None) -> bool:
        media_type = base_media_type(content_type)
        return media_type is not None and media_type in self._settings.allowed_upload_types

    async def analyze_upload(
        self,
        *,
        data: bytes,
        content_type: str | None,
        filename: str | None = None,
        message: str | None = None,
    ) -> AnalysisResponse:
        if not self.is_supported(content_type):
            raise UnsupportedFileTypeError(content_type)
        content_type = base_media_type(content_type)
        if not data:
            raise EmptyUploadError()
        if len(data) > self._settings.max_upload_bytes:
            raise FileTooLargeError(len(data), self._settings.max_upload_bytes)

        attachments: list[types.Part] = []
        file_text: str | None = None
        if content_type == "text/plain":
            file_text = data.decode("utf-8", errors="replace")
        else:
            # Images and PDFs go to the model as inline bytes.
            attachments.append(types.Part.from_bytes(data=data, mime_type=content_type))

        logger.info("Analyzing upload %s (%s, %d bytes)", filename, content_type, len(data))
        prompt = build_file_analysis_prompt(
            file_type=content_type,
            file_name=filename,
            message=message,
            file_text=file_text,
        )
        return await self._gemini.generate_structured(
            prompt, AnalysisResponse, attachments=attachments
        )

    async def analyze_url(
        self,
        *,
        url: str,
        message: str | None = None,
        file_type: str = "image",
    ) -> AnalysisResponse:
        if not is_valid_url(url):
            raise InvalidUrlError(url)

        prompt = build_file_analysis_prompt(
            file_type=file_type, file_url=url.strip(), message=message
        )
        return await self._gemini.generate_structured(prompt, AnalysisResponse)
