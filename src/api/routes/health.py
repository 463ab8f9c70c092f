"""
Routes: GET /health, GET /. Liveness and API info.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import Container, get_container
from src.api.schemas.responses import ApiInfoResponse, HealthResponse

API_VERSION = "1.0.0"

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(container: Container = Depends(get_container)):
    return HealthResponse(
        status="ok",
        message="API is Healthy",
        country_table=container.country_table.state.value,
    )


@router.get("/", response_model=ApiInfoResponse)
async def index(container: Container = Depends(get_container)):
    param = container.settings.grant_query_param
    return {
        "message": "Welcome to the VBytes Language Dataset and Country Codes API",
        "version": API_VERSION,
        "routes": [
            {"method": "GET", "path": "/health", "description": "Health check"},
            {"method": "GET", "path": f"/languages?{param}=file.json", "description": "Get language data"},
            {"method": "GET", "path": f"/countries?{param}=file.json", "description": "Get country data"},
            {"method": "GET", "path": "/country", "description": "Resolve the caller's country"},
        ],
    }
