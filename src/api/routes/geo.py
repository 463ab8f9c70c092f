"""
Route: GET /country. Approximate country of the caller.
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import Container, get_container
from src.api.schemas.responses import CountryResponse, ErrorResponse

router = APIRouter()


def client_address(request: Request) -> str:
    """First X-Forwarded-For hop if present, else the transport peer."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    return request.client.host if request.client else ""


@router.get(
    "/country",
    response_model=CountryResponse,
    response_model_exclude_none=True,
    responses={503: {"model": ErrorResponse}},
)
async def country(request: Request, container: Container = Depends(get_container)):
    """Full country record for the caller, or `{"dial_code": "+1"}`."""
    result = await container.resolver.execute(client_address(request))
    return result.to_dict()
