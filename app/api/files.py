import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.dependencies import get_file_analysis_service
from app.models.analysis import AnalysisResponse, AnalyzeUrlRequest
from app.models.chat import ErrorResponse
from app.services.file_analysis_service import (
    EmptyUploadError,
    FileAnalysisService,
    FileTooLargeError,
    InvalidUrlError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.post(
    "/analyze-file",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def analyze_file_endpoint(
    file: UploadFile | None = File(default=None),
    message: str = Form(default=""),
    analysis_service: FileAnalysisService = Depends(get_file_analysis_service),
) -> AnalysisResponse:
    """
    Analyze an uploaded image, PDF or text file.

    The MIME type must be one of the configured allowed upload types;
    anything else is rejected with 400 before the model is called.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        # One byte past the limit is enough to detect an oversized upload.
        data = await file.read(analysis_service.max_upload_bytes + 1)
        return await analysis_service.analyze_upload(
            data=data,
            content_type=file.content_type,
            filename=file.filename,
            message=message,
        )
    except UnsupportedFileTypeError as e:
        logger.info("Rejected upload %s of type %s", file.filename, e.content_type)
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.exception("File analysis endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")
    finally:
        await file.close()


@router.post(
    "/analyze-url",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}},
)
async def analyze_url_endpoint(
    request: AnalyzeUrlRequest,
    analysis_service: FileAnalysisService = Depends(get_file_analysis_service),
) -> AnalysisResponse:
    try:
        return await analysis_service.analyze_url(
            url=request.url,
            message=request.message,
            file_type=request.file_type,
        )
    except InvalidUrlError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("URL analysis endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")
