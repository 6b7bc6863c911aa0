"""
HDBSCAN Params Web Backend - FastAPI Application.

This is the main entry point for the web backend.
Run with: uvicorn web_frontend.backend.app:app --reload
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hdbscan_params import __version__
from hdbscan_params.api import ApiError, ApiResponse

from .config import config
from .routes import live, validate
from .services.session_manager import session_manager


logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SESSION_SWEEP_SECONDS = 60


async def _sweep_idle_sessions(interval: float = SESSION_SWEEP_SECONDS) -> None:
    """Periodically close idle live sessions until cancelled."""
    while True:
        await asyncio.sleep(interval)
        try:
            closed = session_manager.cleanup_idle_sessions()
        except Exception:
            logger.exception("Idle session sweep failed")
            continue
        if closed:
            logger.info("Closed %d idle live sessions", closed)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the idle-session sweeper; close every live session on shutdown."""
    logger.info("HDBSCAN Params backend starting (version %s)", __version__)
    logger.info("Default debounce: %sms", config.default_debounce_ms)
    logger.info("Session idle timeout: %ss", config.session_idle_seconds)

    sweeper = asyncio.create_task(_sweep_idle_sessions())
    try:
        yield
    finally:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
        session_manager.close_all()
        logger.info("HDBSCAN Params backend shutting down...")


# Create FastAPI app
app = FastAPI(
    title="HDBSCAN Params",
    description="Validation service for HDBSCAN clustering parameters",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report framework-level request errors in the response envelope."""
    errors = exc.errors()
    logger.info("Request validation failed for %s", request.url.path)
    for error in errors:
        logger.debug("  - %s: %s (type: %s)", error['loc'], error['msg'], error['type'])

    response = ApiResponse.error_response(
        ApiError.invalid_request("Invalid request", errors)
    )
    return JSONResponse(status_code=response.status_code, content=response.to_dict())


# Include API routers
app.include_router(validate.router)
app.include_router(live.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# Development runner
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "web_frontend.backend.app:app",
        host=config.host,
        port=config.port,
        reload=True
    )
