from fastapi import APIRouter, Depends

from app.core.settings import Settings
from app.dependencies import get_app_settings


router = APIRouter()


@router.get("/")
def root_health_check(
    settings: Settings = Depends(get_app_settings),
) -> dict[str, str]:
    return {"status": "running", "service": settings.app_name}


@router.get("/health")
def health_check(
    settings: Settings = Depends(get_app_settings),
) -> dict[str, str | bool]:
    # Only whether a key is present; never the key itself.
    return {"status": "ok", "configured": settings.is_configured}
