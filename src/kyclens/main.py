"""
KYC Lens - KYC client maintenance service

FastAPI application entry point.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from kyclens import __version__
from kyclens.clients.manager import ClientManager
from kyclens.config import Settings, settings
from kyclens.fincrime.jurisdictions import exposure_countries_from_settings
from kyclens.fincrime.pep import PepExposureEstimator

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than the configured limit."""

    def __init__(self, app, max_body_size: int):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > self.max_body_size:
                return JSONResponse(
                    status_code=413,
                    content={
                        "error": "Request entity too large",
                        "max_size_bytes": self.max_body_size,
                    },
                )

        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    def __init__(self, app, hsts: bool = False):
        super().__init__(app)
        self.hsts = hsts

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store"

        if self.hsts:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and timing."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or f"req_{uuid4().hex[:12]}"

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Request-ID"] = request_id

        logger.info(
            f"{request.method} {request.url.path} [{request_id}] "
            f"status={response.status_code} time={process_time:.3f}s"
        )

        return response


def build_client_manager(app_settings: Settings) -> ClientManager:
    """Create the client store with the configured exposure list."""
    estimator = PepExposureEstimator(exposure_countries_from_settings(app_settings))
    manager = ClientManager(pep_estimator=estimator)

    if app_settings.seed_demo_data:
        count = manager.seed_demo_clients()
        logger.info(f"Seeded {count} demo clients")

    return manager


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown events."""
        logger.info("Starting KYC Lens...")
        app.state.client_manager = build_client_manager(app_settings)
        logger.info(
            f"KYC Lens started with {len(app.state.client_manager.pep_estimator.exposure_countries)} "
            "PEP exposure jurisdictions"
        )

        yield

        logger.info("KYC Lens shutdown complete")

    app = FastAPI(
        title="KYC Lens",
        description="KYC client maintenance with risk and PEP scoring",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not app_settings.is_production else None,
        redoc_url="/redoc" if not app_settings.is_production else None,
        openapi_url="/openapi.json" if not app_settings.is_production else None,
    )

    # Rate limiting
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[
            f"{app_settings.rate_limit_requests}/{app_settings.rate_limit_window_seconds}seconds"
        ],
        enabled=app_settings.rate_limit_enabled,
    )
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(RequestSizeLimitMiddleware, max_body_size=app_settings.max_request_bytes)
    app.add_middleware(SecurityHeadersMiddleware, hsts=app_settings.is_production)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )

    @app.exception_handler(RateLimitExceeded)
    def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle rate limit exceeded errors."""
        return JSONResponse(
            status_code=429,
            content={
                "error": "Rate limit exceeded",
                "message": "Too many requests. Please try again later.",
                "retry_after": exc.detail,
            },
            headers={"Retry-After": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle uncaught exceptions."""
        logger.exception(f"Unhandled exception: {exc}")

        if app_settings.is_production:
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "message": "An unexpected error occurred.",
                },
            )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc),
                "type": type(exc).__name__,
            },
        )

    @app.get("/health")
    async def health_check(request: Request) -> dict[str, Any]:
        """Health check endpoint."""
        manager = request.app.state.client_manager
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": __version__,
            "clients": manager.get_statistics()["total"],
        }

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with API information."""
        return {
            "name": "KYC Lens",
            "description": "KYC client maintenance with risk and PEP scoring",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    from kyclens.api.routes import clients_router, scoring_router

    app.include_router(clients_router, prefix="/api/v1/clients", tags=["clients"])
    app.include_router(scoring_router, prefix="/api/v1/scoring", tags=["scoring"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
