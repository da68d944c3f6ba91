"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finhealth_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finhealth_gateway.api.v1 import health_report, profile
from finhealth_gateway.infrastructure.observability.logging import setup_logging
from finhealth_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Financial Health Gateway",
        description="Financial health scoring, recommendations and projections",
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
    app.include_router(health_report.router, prefix="/v1", tags=["reports"])
    app.include_router(profile.router, prefix="/v1", tags=["profiles"])

    # Unversioned path used by existing front-end clients
    app.include_router(health_report.router, tags=["reports"], include_in_schema=False)

    return app


app = create_app()
