from fastapi import APIRouter
from pydantic import BaseModel

from docformat import __version__

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Report liveness and the installed package version."""
    return HealthResponse(status="ok", version=__version__)
