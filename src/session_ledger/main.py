"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from session_ledger.config.settings import get_settings
from session_ledger.config.logging_config import setup_logging
from session_ledger.repositories.sqlalchemy.database import init_db
from session_ledger.repositories.redis import create_redis_client
from session_ledger.api.rate_limit import RequestRateLimiter
from session_ledger.api.routers import transactions_router, health_router
from session_ledger.core.exceptions import AppError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-site",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "DENY",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    settings = get_settings()
    app.state.redis = create_redis_client(settings)
    app.state.rate_limiter = RequestRateLimiter(
        settings.rate_limit_per_window, settings.rate_limit_window_seconds
    )
    yield
    # Shutdown
    app.state.redis.close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Session-scoped transaction ledger with cached balance summaries",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(transactions_router)
app.include_router(health_router)


@app.middleware("http")
async def rate_limit(request: Request, call_next):
    limiter: RequestRateLimiter = request.app.state.rate_limiter
    client_key = request.client.host if request.client else "unknown"
    decision = limiter.check(client_key)
    if decision.allowed:
        response = await call_next(request)
    else:
        response = JSONResponse(
            status_code=429,
            content={
                "type": "application_error",
                "message": f"Rate limit exceeded, retry in {decision.reset_seconds} seconds",
            },
            headers={"Retry-After": str(decision.reset_seconds)},
        )
    response.headers.update(decision.headers())
    return response


# Registered last so it wraps rate-limited responses too
@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": "validation_error", "issues": exc.issues},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Undecodable bodies and bad parameters get the same shape as ValidationError."""
    issues = [
        {"path": list(err.get("loc", ())), "message": err.get("msg", ""), "code": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"type": "validation_error", "issues": issues},
    )


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": "authorization_error", "message": exc.message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": "application_error", "message": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"type": "internal_error", "message": "Internal server error"},
    )


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
