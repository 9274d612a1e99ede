"""FastAPI application factory for DeviceHub."""

import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from devicehub.common.config import DeviceHubSettings, get_settings
from devicehub.common.database import Database
from devicehub.common.exceptions import StoreError
from devicehub.common.handlers import register_error_handlers
from devicehub.common.logging import get_logger, setup_logging
from devicehub.common.middleware import RequestContextMiddleware
from devicehub.common.schemas import HealthFailure, HealthResponse
from devicehub.deps import get_db

logger = get_logger("app")

_PROCESS_STARTED = time.monotonic()


def create_app(settings: DeviceHubSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    db = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        await db.init()
        logger.info("DeviceHub listening with API prefix %r", settings.api_prefix)
        yield
        # Shutdown: drain the pool
        await db.close()
        logger.info("Database pool closed")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    # Last added runs outermost: CORS headers also reach catch-all 500s.
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    @app.get(
        "/health",
        response_model=HealthResponse,
        responses={500: {"model": HealthFailure}},
    )
    async def health(store: Database = Depends(get_db)):
        try:
            now = await store.ping()
        except StoreError as exc:
            logger.error("Health check failed: %s", exc.message)
            return JSONResponse(
                status_code=500,
                content=HealthFailure(error=exc.message).model_dump(),
            )
        return HealthResponse(
            timestamp=str(now),
            uptime=round(time.monotonic() - _PROCESS_STARTED, 3),
            version=settings.api_version,
        )

    # Mount routers
    from devicehub.tenants.router import router as tenant_router
    from devicehub.users.router import router as user_router
    from devicehub.devices.router import router as device_router
    from devicehub.apps.router import router as app_router

    prefix = settings.api_prefix
    app.include_router(tenant_router, prefix=prefix)
    app.include_router(user_router, prefix=prefix)
    app.include_router(device_router, prefix=prefix)
    app.include_router(app_router, prefix=prefix)

    return app
