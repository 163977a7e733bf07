"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tronics.api.routes import include_api_routes
from tronics.config import Settings, settings as default_settings
from tronics.services.errors import ProductNotFoundError, ProductValidationError
from tronics.services.product_registry import ProductRegistry

logger = logging.getLogger(__name__)


def create_app(
    registry: ProductRegistry | None = None,
    *,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The registry is owned by the application and shared with the handlers
    through ``app.state``. When none is given one is built from settings.
    """

    settings = settings or default_settings

    app = FastAPI(
        title="Tronics",
        description="In-memory product catalog service",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else build_registry(settings)

    _configure_cors(app, settings)
    _configure_request_logging(app, settings)
    _register_exception_handlers(app)
    include_api_routes(app)

    return app


def build_registry(settings: Settings) -> ProductRegistry:
    """Build a registry using the configured key policy and seed products."""

    registry = ProductRegistry(key_policy=settings.KEY_POLICY)
    seed = settings.seed_products
    if seed:
        registry.seed(seed)

    logger.info(
        "Product registry ready (key_policy=%s, products=%d)",
        registry.key_policy.value,
        registry.count(),
    )
    return registry


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow broad access in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _configure_request_logging(app: FastAPI, settings: Settings) -> None:
    """Log every request with its status code and duration when enabled."""

    if not settings.REQUEST_LOGGING:
        return

    request_logger = logging.getLogger("tronics.requests")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate registry and decoding errors into HTTP responses."""

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        logger.info("Product %s not found", exc.product_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "product not found"},
        )

    @app.exception_handler(ProductValidationError)
    async def product_invalid(
        request: Request, exc: ProductValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_invalid(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
