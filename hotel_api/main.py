import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotel_api.api.deps import engine, settings
from hotel_api.api.routers.health import router as health_router
from hotel_api.api.routers.orders import router as orders_router
from hotel_api.api.routers.rooms import router as rooms_router
from hotel_api.domain.errors import (
    DomainError,
    GatewayError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from hotel_api.infrastructure.db.tables import metadata

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.use_in_memory:
        # Initialize DB tables (for dev/demo purposes); scripts/migrate_db.py does the same
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    yield
    # Cleanup
    await engine.dispose()

app = FastAPI(
    title="Hotel Orders API",
    version="0.1.0",
    lifespan=lifespan
)


def _log_error(request: Request, exc: Exception, message: str) -> str:
    error_id = str(uuid.uuid4())
    logger.error(
        message,
        exc_info=exc,
        extra={
            "error_id": error_id,
            "error_code": getattr(exc, "code", None),
            "path": request.url.path,
            "method": request.method,
        }
    )
    return error_id


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info("Order not found", extra={"order_id": exc.order_id, "missing": exc.missing})
    return JSONResponse(
        status_code=404,
        content={"detail": "Order not found", "code": exc.code},
    )


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    error_id = _log_error(request, exc, "Payment processor call failed")
    return JSONResponse(
        status_code=502,
        content={
            "detail": "Payment processor unavailable",
            "error_id": error_id,
        }
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    error_id = _log_error(request, exc, "Persistence failure")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Failed to store or read order data",
            "error_id": error_id,
        }
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    error_id = _log_error(request, exc, "Unhandled domain error")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_id": error_id},
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = _log_error(request, exc, "Unhandled exception occurred")

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(rooms_router, prefix="/api/v1", tags=["Rooms"])
app.include_router(orders_router, prefix="/api/v1", tags=["Orders"])
