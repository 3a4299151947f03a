# -*- coding: utf-8 -*-
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from app import config
from app.modules.access_sentinel import get_container
from app.modules.access_sentinel.domain import ConfigOutOfRangeError, EventSourceError
from app.pydantic_models import HealthCheck
from app.routers import alerts, behavior, refresh, settings, travel

logger.remove()
logger.add(sys.stdout, level=config.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    await container.alert_stream.start()
    if config.AUTO_REFRESH_ENABLED:
        container.service.start_periodic()

    yield

    # Run things on shutdown
    logger.info("Shutting down...")
    await container.service.stop()
    await container.alert_stream.stop()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Access Sentinel API",
    lifespan=lifespan,
)
app.state.container = get_container()

logger.debug("Configuring CORS with the following settings:")
allow_origins = config.ALLOWED_ORIGINS if config.ALLOWED_ORIGINS else ()
logger.debug(f"ALLOWED_ORIGINS: {allow_origins}")
allow_origin_regex = config.ALLOWED_ORIGINS_REGEX if config.ALLOWED_ORIGINS_REGEX else None
logger.debug(f"ALLOWED_ORIGINS_REGEX: {allow_origin_regex}")
logger.debug(f"ALLOWED_METHODS: {config.ALLOWED_METHODS}")
logger.debug(f"ALLOWED_HEADERS: {config.ALLOWED_HEADERS}")
logger.debug(f"ALLOW_CREDENTIALS: {config.ALLOW_CREDENTIALS}")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_origin_regex=allow_origin_regex,
    allow_methods=config.ALLOWED_METHODS,
    allow_headers=config.ALLOWED_HEADERS,
    allow_credentials=config.ALLOW_CREDENTIALS,
)

app.include_router(travel.router)
app.include_router(behavior.router)
app.include_router(alerts.router)
app.include_router(settings.router)
app.include_router(refresh.router)


@app.get(
    "/health",
    tags=["Healthcheck"],
    summary="Performs a health check",
    responses={
        200: {"status": "OK"},
        503: {"status": "Service Unavailable"},
    },
    response_model=HealthCheck,
)
async def healthcheck(request: Request):
    repository = request.app.state.container.event_repository
    if not repository.test_connection():
        logger.warning("Access log source is not reachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "Service Unavailable"},
        )
    return {"status": "OK"}


@app.exception_handler(ConfigOutOfRangeError)
async def handle_config_out_of_range(request: Request, ex: ConfigOutOfRangeError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(ex), "errors": ex.errors},
    )


@app.exception_handler(EventSourceError)
async def handle_event_source_error(request: Request, ex: EventSourceError):
    logger.error(f"EventSourceError: {ex}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(ex)},
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, ex: RequestValidationError):
    logger.error(f"RequestValidationError: {ex.errors()}")
    content = {"detail": jsonable_encoder(ex.errors())}
    return JSONResponse(content=content, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


def serve():
    """Entry point for serving the API with uvicorn"""
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    serve()
