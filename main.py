import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import AppException, format_validation_errors
from app.core.logging_config import setup_logging
from app.api.endpoints import auth, companies, health, jobs, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    logger.info("Starting up Jobly API...")
    init_db()
    logger.info("Database models registered")

    yield

    # Shutdown
    logger.info("Shutting down Jobly API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Companies and jobs CRUD API",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}}
    )


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Translate store and auth errors into their HTTP status."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request bodies that fail their schema are a 400, not FastAPI's default 422."""
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Validation Error: {errors}")
    return _error_response(status.HTTP_400_BAD_REQUEST, errors)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, exc.detail)


# Include routers
app.include_router(auth.router, prefix=settings.API_V1_STR)
app.include_router(companies.router, prefix=settings.API_V1_STR)
app.include_router(jobs.router, prefix=settings.API_V1_STR)
app.include_router(users.router, prefix=settings.API_V1_STR)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": "Jobly API",
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
