"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from pydantic import ValidationError as PydanticValidationError
import logging

from rentease.config import settings
from rentease.database import check_backend_connection, create_store_client
from rentease.routers import (
    admin_router,
    auth_router,
    contact_router,
    owner_router,
    pages_router,
    properties_router
)
from rentease.utils.exceptions import APIException
from rentease.services.error_handler import ErrorHandlerService
from rentease.services.session import SessionManager
from rentease.middleware import RequestLoggingMiddleware
from rentease.utils.dependencies import get_session_manager

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Creates the session registry on startup and tears every session down on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    if not settings.backend_configured:
        logger.warning("SUPABASE_URL / SUPABASE_ANON_KEY not set; backend calls will fail")

    app.state.session_manager = SessionManager(create_store_client, idle_timeout=settings.session_idle_timeout)

    yield

    logger.info("Shutting down application")
    app.state.session_manager.close_all()


# Create FastAPI application instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Rental marketplace for PGs, flats and rooms.

    ## Features

    * **Browse**: Available listings filtered by location, category and maximum rent
    * **Owner dashboard**: Owners add, edit and delete their own listings
    * **Admin dashboard**: Moderators see every user, listing and contact message
    * **Contact**: Visitors send messages to the team

    ## Authentication

    Sign in through `/auth/login` to obtain a session token, then send it in the
    Authorization header as `Bearer <token>`. Identity and credentials are handled
    by the hosted auth service.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Pages", "description": "Home, about and navigation shell"},
        {"name": "Properties", "description": "Browse and view listings"},
        {"name": "Authentication", "description": "Sign in, sign up and sign out"},
        {"name": "Owner", "description": "Owner dashboard and listing editor"},
        {"name": "Admin", "description": "Moderation dashboard"},
        {"name": "Contact", "description": "Contact form"},
        {"name": "Health", "description": "Service health checks"}
    ],
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Processing-Time"],
)

app.add_middleware(
    RequestLoggingMiddleware,
    enable_request_logging=settings.debug and not settings.is_testing
)

# Include routers
app.include_router(pages_router)
app.include_router(properties_router)
app.include_router(auth_router)
app.include_router(owner_router)
app.include_router(admin_router)
app.include_router(contact_router)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions with structured error responses."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(PydanticValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: PydanticValidationError):
    """Handle Pydantic validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle FastAPI HTTP exceptions with structured error responses."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness check; does not contact the backend."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "backend_configured": settings.backend_configured
    }


@app.get("/health/backend", tags=["Health"])
async def backend_health_check(manager: SessionManager = Depends(get_session_manager)):
    """
    Check that the hosted record store answers.
    """
    client = await manager.anonymous_client()

    if not await check_backend_connection(client):
        raise HTTPException(
            status_code=503,
            detail="Backend connection failed"
        )

    return {
        "status": "healthy",
        "backend": "connected"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "rentease.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
