import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from checkout.api.dependencies import XHR_MARKER
from checkout.api.deps import engine
from checkout.api.responses import redirect_with_flash
from checkout.api.routers.checkout import router as checkout_router
from checkout.api.routers.health import router as health_router
from checkout.application.messages import error_message
from checkout.application.paths import API_PREFIX
from checkout.config import get_settings
from checkout.domain.errors import GuardError, InvalidParamsError, ListingNotFoundError
from checkout.infrastructure.db.tables import metadata

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB tables (for dev/demo purposes)
    if not settings.use_in_memory:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    yield
    # Cleanup
    await engine.dispose()

app = FastAPI(
    title="Marketplace Checkout API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(GuardError)
async def guard_error_handler(request: Request, exc: GuardError):
    """A checkout precondition failed: send the buyer back with a flash message."""
    logger.info(
        "Checkout guard rejected request",
        extra={"code": exc.code.value, "path": request.url.path},
    )
    error_msg = error_message(exc.code)
    if request.headers.get("X-Requested-With") == XHR_MARKER:
        return JSONResponse(content={"error_msg": error_msg})
    return redirect_with_flash(exc.redirect_to, error_msg)


@app.exception_handler(ListingNotFoundError)
async def listing_not_found_handler(request: Request, exc: ListingNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": error_message(exc.code), "code": exc.code.value},
    )


@app.exception_handler(InvalidParamsError)
async def invalid_params_handler(request: Request, exc: InvalidParamsError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"{exc.value} is not shipping or pickup.", "field": exc.field},
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    # Log the full error with context for internal debugging
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(checkout_router, prefix=API_PREFIX, tags=["Checkout"])
