from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.core.settings import get_settings
from app.services.chat_flow import ChatFlowService
from app.services.code_service import CodeService
from app.services.file_analysis_service import FileAnalysisService
from app.services.gemini_service import GeminiService
from app.services.summary_service import SummaryService


@lru_cache
def get_gemini_service() -> GeminiService:
    return GeminiService(settings=get_settings())


def get_chat_flow_service(
    gemini_service: GeminiService = Depends(get_gemini_service),
) -> ChatFlowService:
    return ChatFlowService(gemini_service, settings=get_settings())


def get_file_analysis_service(
    gemini_service: GeminiService = Depends(get_gemini_service),
) -> FileAnalysisService:
    return FileAnalysisService(gemini_service, settings=get_settings())


def get_code_service(
    gemini_service: GeminiService = Depends(get_gemini_service),
) -> CodeService:
    return CodeService(gemini_service, settings=get_settings())


def get_summary_service(
    gemini_service: GeminiService = Depends(get_gemini_service),
) -> SummaryService:
    return SummaryService(gemini_service)
