"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bhxh_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bhxh_calculator.api.v1 import calculation, reference
from bhxh_calculator.infrastructure.observability.logging import setup_logging
from bhxh_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="BHXH Lump-Sum Calculator",
        description="One-time social insurance benefit calculation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculation.router, prefix="/v1", tags=["calculations"])
    app.include_router(reference.router, prefix="/v1", tags=["reference"])

    return app


app = create_app()
