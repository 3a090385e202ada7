import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_chat_flow_service, get_summary_service
from app.models.chat import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    SummarizeRequest,
    SummaryResponse,
)
from app.services.chat_flow import ChatFlowService
from app.services.summary_service import SummaryService

logger = logging.getLogger(__name__)

router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.post("/chat", response_model=ChatResponse)
async def chat_endpoint(
    request: ChatRequest,
    chat_flow: ChatFlowService = Depends(get_chat_flow_service),
) -> ChatResponse:
    try:
        return await chat_flow.respond(
            message=request.message,
            conversation_history=request.conversation_history,
            is_greeting=request.is_greeting,
        )
    except Exception as e:
        logger.exception("Chat endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")


@router.post("/summarize-context", response_model=SummaryResponse)
async def summarize_context(
    request: SummarizeRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    try:
        return await summary_service.summarize(request.conversation_history)
    except Exception as e:
        logger.exception("Summarize endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")
