"""FastAPI application for the payout calculator.

The service is stateless and makes no outbound calls.
"""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from payout import __version__
from payout.api.endpoints import router

HOST = os.environ.get("PAYOUT_HOST", "0.0.0.0")
PORT = int(os.environ.get("PAYOUT_PORT", "8000"))
DEBUG = os.environ.get("PAYOUT_DEBUG", "false").lower() in ("true", "1", "yes")

# A request body only ever carries a single price
MAX_REQUEST_SIZE = 16 * 1024

app = FastAPI(
    title="Creator Payout Calculator",
    description="Compare creator payouts across note, tips, Brain and Coconala",
    version=__version__,
)


def _declared_length(request: Request) -> int | None:
    """Content-Length as an int, None if absent, -1 if malformed."""
    header = request.headers.get("content-length")
    if header is None:
        return None
    try:
        return int(header)
    except ValueError:
        return -1


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Answer oversized or malformed Content-Length before reading the body."""
    length = _declared_length(request)
    if length is not None and length < 0:
        return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length"})
    if length is not None and length > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Report liveness and the package version."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Serve the app with uvicorn on PAYOUT_HOST:PAYOUT_PORT (reload if PAYOUT_DEBUG)."""
    uvicorn.run(
        "payout.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
