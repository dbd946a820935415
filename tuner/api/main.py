"""
Radio Tuner - FastAPI Application

Main entry point for the web server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger
import time

from ..core.config import settings
from ..core.logging import setup_logging
from ..radio import RadioController, RadioError, RadioNotFoundError, RadioTimeoutError
from .dependencies import get_radio, reset_radio
from .models import HealthResponse
from .routes import tune, radio


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs startup and shutdown logic.
    """
    # Startup
    setup_logging(settings)
    logger.info(f"Starting {settings.app_name} API...")
    logger.info(
        f"Radio backend: {settings.radio.backend} "
        f"(executable={settings.radio.executable}, strict={settings.radio.strict})"
    )

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name} API...")
    reset_radio()


# Create FastAPI application
app = FastAPI(
    title="Radio Tuner API",
    description="""
    Web control surface for a radio driven by an external command-line program.

    ## Features

    * **Tune** - Tune to a station and read back the status as plain text
    * **Radio** - The same operations with invocation details as JSON

    ## Authentication

    None. Station identifiers are reduced to lowercase letters and digits
    before they reach the radio program.
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add X-Process-Time header to all responses"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with detailed messages"""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation error",
            "errors": errors
        }
    )


def _radio_error_type(exc: RadioError) -> str:
    if isinstance(exc, RadioNotFoundError):
        return "not_found"
    if isinstance(exc, RadioTimeoutError):
        return "timeout"
    return "command_failed"


@app.exception_handler(RadioError)
async def radio_exception_handler(request: Request, exc: RadioError):
    """Radio program could not be run (strict mode only)"""
    logger.error(f"Radio error on {request.url.path}: {exc}")
    if request.url.path.startswith("/tune"):
        return PlainTextResponse(
            f"Radio unavailable: {exc}\n",
            status_code=status.HTTP_502_BAD_GATEWAY
        )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "detail": "Radio unavailable",
            "message": str(exc),
            "type": _radio_error_type(exc)
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.opt(exception=exc).error(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "message": str(exc) if settings.debug else "An unexpected error occurred"
        }
    )


# Include routers
app.include_router(
    tune.router,
    tags=["Tune"]
)

app.include_router(
    radio.router,
    prefix="/api/radio",
    tags=["Radio"]
)


# Root endpoints
@app.get("/", tags=["Root"])
async def root():
    """API root endpoint"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health",
        "tune": "/tune?station={station}"
    }


@app.get("/health", response_model=HealthResponse, tags=["Root"])
def health_check(radio_controller: RadioController = Depends(get_radio)):
    """Health check endpoint"""
    available = radio_controller.check()
    return HealthResponse(
        status="healthy" if available else "degraded",
        version=settings.app_version,
        backend=radio_controller.backend.value,
        radio_available=available
    )


def run() -> None:
    """Run the API server with uvicorn using APISettings"""
    import uvicorn

    uvicorn.run(
        "tuner.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        workers=None if settings.api.reload else settings.api.workers,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
