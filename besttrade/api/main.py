"""FastAPI application for best-trade selection."""

import os

import uvicorn
from fastapi import FastAPI

from besttrade import __version__
from besttrade.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BESTTRADE_HOST", "0.0.0.0")
PORT = int(os.environ.get("BESTTRADE_PORT", "8000"))
DEBUG = os.environ.get("BESTTRADE_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Best Trade Selector",
    description="Selects the best single-route swap from quoted candidate routes",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - BESTTRADE_HOST: Host to bind to (default: 0.0.0.0)
    - BESTTRADE_PORT: Port to bind to (default: 8000)
    - BESTTRADE_DEBUG: Enable debug/reload mode (default: false)
    - BESTTRADE_LESS_HOPS_THRESHOLD_BIPS: Fewer-hops threshold (default: 50)
    """
    uvicorn.run(
        "besttrade.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
