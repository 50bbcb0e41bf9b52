from fastapi import APIRouter

from core.config import Settings, get_settings

router = APIRouter()


@router.get("/config", response_model=Settings, tags=["System"])
async def get_configuration():
    """Effective formatter configuration (archive guard, fonts, output name)."""
    return get_settings()
