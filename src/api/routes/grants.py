"""
Routes: GET /languages, GET /countries. Redirect to a short-lived grant.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from src.api.dependencies import Container, get_container
from src.api.schemas.responses import ErrorResponse
from src.core.errors import InvalidArgument

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _resource_param(request: Request, container: Container) -> str:
    """Read the per-deployment query parameter (`file` or `name`)."""
    param = container.settings.grant_query_param
    value = request.query_params.get(param, "").strip()
    if not value:
        logger.warning(f"Missing '{param}' query parameter in {request.url.path} request.")
        raise InvalidArgument(
            f"Provide the ?{param}=filename.json query param to download a file.",
            code=f"Missing {param}",
        )
    return value


@router.get("/languages", status_code=302, responses=_ERROR_RESPONSES)
async def languages(request: Request, container: Container = Depends(get_container)):
    """Redirect to a grant for a languages dataset file."""
    key = _resource_param(request, container)
    grant = container.languages_issuer.issue(key)
    return RedirectResponse(grant.resource_url, status_code=302)


@router.get("/countries", status_code=302, responses=_ERROR_RESPONSES)
async def countries(request: Request, container: Container = Depends(get_container)):
    """Redirect to a CloudFront-signed grant for a country data file."""
    key = _resource_param(request, container)
    grant = container.countries_issuer.issue(key)
    return RedirectResponse(grant.resource_url, status_code=302)
