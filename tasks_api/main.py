"""
Tasks API - Main application module.
"""
import logging
import time
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings
from .core.database import check_db_connection, init_db
from .core.exceptions import TaskServiceError
from .routers import tasks

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Tasks API",
    description="CRUD microservice for task records backed by PostgreSQL",
    version=settings.service_version
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()

    # Skip logging for health checks to reduce noise
    if request.url.path != "/health":
        logger.info(f"{request.method} {request.url.path}")

    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if request.url.path != "/health":
        logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


def error_response(request: Request, status_code: int, error_type: str, message: str) -> JSONResponse:
    """Build the JSON error envelope"""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "type": error_type,
                "status_code": status_code,
                "message": message,
                "path": str(request.url.path),
                "timestamp": time.time()
            }
        }
    )


@app.exception_handler(TaskServiceError)
async def task_service_exception_handler(request: Request, exc: TaskServiceError):
    """Handle validation, not-found and store errors"""
    return error_response(request, exc.status_code, exc.error_type, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400"""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")
    logger.warning(f"Rejected request {request.method} {request.url.path}: {messages}")
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "validation_error", "; ".join(messages)
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    return error_response(request, exc.status_code, "http_error", str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unhandled exception: {exc}")
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Internal server error" if not settings.debug else str(exc)
    )


app.include_router(
    tasks.router,
    prefix=settings.api_prefix + "/tasks",
    tags=["tasks"]
)


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Starting Tasks API...")
    if init_db(settings.db_connect_retries, settings.db_connect_retry_delay):
        logger.info("Database initialized successfully")
    else:
        logger.error("Database initialization failed")
    logger.info("Tasks API startup completed")


@app.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "message": "Tasks API is operational"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    db_healthy = check_db_connection()
    return JSONResponse(
        status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "timestamp": time.time()
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tasks_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
