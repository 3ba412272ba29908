"""FastAPI application for the split quote service.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from splitroute import __version__
from splitroute.api.endpoints import router
from splitroute.errors import SplitError
from splitroute.safe_int import SafeIntError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SPLITROUTE_HOST", "0.0.0.0")
PORT = int(os.environ.get("SPLITROUTE_PORT", "8000"))
DEBUG = os.environ.get("SPLITROUTE_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (64 KiB; a quote request is a handful of integers)
MAX_REQUEST_SIZE = 64 * 1024

app = FastAPI(
    title="Split Router",
    description="Optimal split of one swap across a CLMM window and a CPMM",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(SplitError)
@app.exception_handler(SafeIntError)
async def solver_rejection(request: Request, exc: Exception) -> JSONResponse:
    """No executable split under these constraints: report which rule failed."""
    logger.warning(
        "split_rejected",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(status_code=422, content={"error": type(exc).__name__, "detail": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log anything the solver did not anticipate with its traceback."""
    logger.exception("split_error", path=request.url.path, error=type(exc).__name__)
    return JSONResponse(status_code=500, content={"error": "InternalError", "detail": "Internal server error"})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the split quote server.

    Configuration via environment variables:
    - SPLITROUTE_HOST: Host to bind to (default: 0.0.0.0)
    - SPLITROUTE_PORT: Port to bind to (default: 8000)
    - SPLITROUTE_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "splitroute.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
