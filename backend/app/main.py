"""
FastAPI entrypoint for the Projects backend application.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from app.core.config import settings
from app.core.exceptions import CompletionFailed, Forbidden, NotFound, Unauthenticated, ValidationError
from app.core.utils import add_error, format_error
from app.api.router import api_router
from app.api.routes.projects import project_path

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title="Projects API",
    description="Backend API for personal project management",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(request: Request, exc: Unauthenticated):
    return RedirectResponse(settings.SIGN_IN_PATH, status_code=status.HTTP_302_FOUND)


@app.exception_handler(Forbidden)
@app.exception_handler(NotFound)
async def forbidden_handler(request: Request, exc: Exception):
    # Same target for both so a redirect never reveals whether a project exists
    return RedirectResponse(settings.DASHBOARD_PATH, status_code=status.HTTP_302_FOUND)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content=format_error(exc.message, exc.errors)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Same body shape as ValidationError, keyed by the offending field
    errors = {}
    for error in exc.errors():
        location = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        add_error(errors, ".".join(location), error["msg"])
    return JSONResponse(status_code=422, content=format_error("Validation failed", errors))


@app.exception_handler(CompletionFailed)
async def completion_failed_handler(request: Request, exc: CompletionFailed):
    return RedirectResponse(
        project_path(exc.project_id),
        status_code=status.HTTP_303_SEE_OTHER,
        headers={"X-Flash-Alert": exc.message}
    )


@app.get("/")
async def root():
    """Dashboard / health check endpoint."""
    return {"message": "Projects API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
