"""
FastAPI Application: VBytes Dataset API.

Architecture:
  - CloudFront signed URLs (policy-signed, verified at the edge)
  - S3 presigned URLs (verified by the storage layer)
  - ip-api.com + in-memory country table for caller geolocation

Run locally:
    uvicorn src.api.main:create_app --factory --port 5000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.dependencies import Container, build_container
from src.api.routes.geo import router as geo_router
from src.api.routes.grants import router as grants_router
from src.api.routes.health import API_VERSION, router as health_router
from src.config.settings import Settings, get_settings
from src.core.errors import GrantServiceError

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """
    Build the app.

    The container is built here, before the app exists, so missing
    configuration raises ConfigurationError to the hosting process
    instead of failing the first request.
    """
    settings = settings or (container.settings if container else get_settings())
    logging.basicConfig(level=settings.log_level)

    container = container or build_container(settings)

    app = FastAPI(
        title="VBytes Dataset API",
        description="Short-lived signed grants for dataset files and caller country lookup.",
        version=API_VERSION,
    )
    app.state.container = container

    # ── Startup: warm the country table before accepting traffic ──
    @app.on_event("startup")
    async def startup():
        container.warm_up()
        logger.info("VBytes Dataset API started")

    @app.exception_handler(GrantServiceError)
    async def service_error_handler(request: Request, exc: GrantServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(health_router, tags=["Health"])
    app.include_router(grants_router, tags=["Grants"])
    app.include_router(geo_router, tags=["Geo"])

    return app
