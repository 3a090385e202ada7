import logging

from fastapi import APIRouter

from app.core.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
def root_health_check() -> dict[str, str]:
    settings = get_settings()
    return {"status": "running", "service": settings.app_name}


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}
