import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_code_service
from app.models.chat import ErrorResponse
from app.models.code import CodeRequest, CodeResponse
from app.services.code_service import CodeService

logger = logging.getLogger(__name__)

router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.post("/generate-code", response_model=CodeResponse)
async def generate_code_endpoint(
    request: CodeRequest,
    code_service: CodeService = Depends(get_code_service),
) -> CodeResponse:
    try:
        return await code_service.generate(
            prompt=request.prompt,
            language=request.language,
            previous_code=request.previous_code,
        )
    except Exception as e:
        logger.exception("Code generation endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")
