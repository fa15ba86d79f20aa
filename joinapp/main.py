"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error mapping, shutdown of pooled clients.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from joinapp.api.v1.router import api_router
from joinapp.cache.redis_client import close_redis
from joinapp.config import get_settings
from joinapp.core.logging import configure_logging
from joinapp.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Shutdown: release the Redis pool and database connections."""
    yield
    await close_redis()
    await engine.dispose()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Decode/validation errors are client errors: 400 with the validation message."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in errors
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Persistence/cache failures surface as 400 with the raw message."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        description="User management: registration, login/logout with cached sessions, paginated user search.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(RedisError, storage_error_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router)

    return app


app = create_app()
