# src/catalog/main.py
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from catalog.api.v1.router import api_router
from catalog.core.config import Settings, get_settings
from catalog.core.logging_config import configure_logging
from catalog.core.metrics import CATALOG_PRODUCTS, REQUEST_COUNT, record_catalog_change
from catalog.domain.sample_data import initial_state
from catalog.repositories.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        REQUEST_COUNT.labels(
            method=request.method,
            path=request.url.path,
            status_code=str(response.status_code),
        ).inc()
        return response


limiter = Limiter(key_func=get_remote_address)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # Startup: logging and catalog store
        configure_logging(settings.log_level)
        store = CatalogStore(initial_state(seed=settings.seed_sample_data))
        unsubscribe = store.subscribe(record_catalog_change)
        CATALOG_PRODUCTS.set(len(store.state.products))
        app.state.catalog_store = store
        logger.info("Catalog ready with %d products", len(store.state.products))
        yield
        # Shutdown
        unsubscribe()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # Rate Limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # Metrics Middleware
    app.add_middleware(MetricsMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router)

    @app.get("/healthz", tags=["Health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok", "version": settings.app_version}

    @app.get("/readyz", tags=["Health"])
    async def readiness_check() -> dict[str, str]:
        return {"status": "ready"}

    @app.get("/metrics", tags=["Monitoring"])
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()
