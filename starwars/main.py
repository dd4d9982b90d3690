from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from starwars.api.v1.routers import api_router, health_router
from starwars.core.config import get_settings
from starwars.core.constants import SERVICE_NAME, SERVICE_VERSION
from starwars.core.logging import configure_logging
from starwars.core.tracing import configure_tracing, instrument_fastapi, shutdown_tracing
from starwars.database.session import dispose_engine
from starwars.exceptions import ResourceNotFoundError, WriteFailedError
from starwars.metrics import register_metrics

logger = logging.getLogger(__name__)

# Structured logging (ECS JSON)
configure_logging()

configure_tracing(
    service_name=SERVICE_NAME,
    service_version=SERVICE_VERSION,
    environment=get_settings().environment,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Graceful shutdown
    await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Star Wars API",
        description="Characters, planets and episodes of the Star Wars saga",
        version=SERVICE_VERSION,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(WriteFailedError)
    async def write_failed_handler(request: Request, exc: WriteFailedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning(
            "Integrity constraint violated",
            extra={"path": request.url.path, "error": str(exc.orig)},
        )
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Request conflicts with existing data"},
        )

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api/v1")
    register_metrics(app)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


__all__ = ["app", "create_app"]
