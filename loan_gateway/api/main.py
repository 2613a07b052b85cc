"""FastAPI application factory"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_gateway.api.dependencies import get_request_id
from loan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_gateway.api.v1 import catalog, eligibility, rates
from loan_gateway.infrastructure.observability.logging import setup_logging
from loan_gateway.infrastructure.observability.metrics import validation_failure_counter
from loan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed requests with 400 and field-level details"""
    validation_failure_counter.labels(endpoint=request.url.path).inc()
    details = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logging.warning(
        "Request validation failed",
        extra={"request_id": get_request_id(request), "path": request.url.path, "error_count": len(details)},
    )
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": details})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Eligibility Gateway",
        description="Loan eligibility, pricing and amortization service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(eligibility.router, prefix=settings.api_prefix, tags=["eligibility"])
    app.include_router(rates.router, prefix=settings.api_prefix, tags=["rates"])
    app.include_router(catalog.router, prefix=settings.api_prefix, tags=["catalog"])

    return app


app = create_app()


def run() -> None:
    """Serve the gateway with uvicorn"""
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
