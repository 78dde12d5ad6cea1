"""
FastAPI Application Entry Point.

Path: kitchen_cursor/main.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kitchen_cursor import __version__
from kitchen_cursor.api.routes import (
    auth,
    featured_products,
    generate,
    moderation,
    posts,
    public,
    reviews,
    site_settings,
)
from kitchen_cursor.infrastructure.config.logging import configure_logging
from kitchen_cursor.infrastructure.config.settings import get_settings
from kitchen_cursor.shared.exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InfrastructureException,
    UnauthorizedError,
)

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"[App] Kitchen Cursor API {__version__} starting "
        f"(llm={settings.llm_provider}/{settings.llm_model})"
    )
    yield
    logger.info("[App] Shutting down")


app = FastAPI(
    title="Kitchen Cursor API",
    description="Affiliate blog CMS with AI post generation and moderation",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error mapping
# =============================================================================

@app.exception_handler(DomainValidationError)
async def validation_error_handler(request: Request, exc: DomainValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_errors(exc)},
    )


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    return JSONResponse(
        status_code=401,
        content={"error": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(DuplicateEntityError)
async def duplicate_handler(request: Request, exc: DuplicateEntityError):
    return JSONResponse(status_code=409, content={"error": str(exc)})


@app.exception_handler(InfrastructureException)
async def internal_error_handler(request: Request, exc: InfrastructureException):
    logger.error(f"[App] {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


# Routes
app.include_router(auth.router, prefix="/api/v1")
app.include_router(generate.router, prefix="/api/v1")
app.include_router(moderation.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")
app.include_router(reviews.router, prefix="/api/v1")
app.include_router(featured_products.router, prefix="/api/v1")
app.include_router(site_settings.router, prefix="/api/v1")
app.include_router(public.router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Kitchen Cursor API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "generate": "/api/v1/admin/generate-post",
    }
