"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_engine.api.dependencies import get_request_id
from decision_engine.api.loan import decision
from decision_engine.infrastructure.observability.logging import setup_logging
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)

INVALID_REQUEST_MESSAGE = "Invalid request!"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Malformed bodies are client errors, reported in the decision body shape"""
    record_decision("invalid")
    logging.warning(f"Malformed request: {exc.errors()}", extra={"request_id": get_request_id(request)})
    return decision.error_response(400, INVALID_REQUEST_MESSAGE)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Decision Engine",
        description="Maximum approvable loan amount and period service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/loan", tags=["decisions"])

    return app


app = create_app()
