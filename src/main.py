from __future__ import annotations

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.network import router as network_router
from src.adapters.api.controllers.realtime import router as realtime_router
from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import NetworkError

app = FastAPI(title="MetroPath")
app.include_router(network_router)
app.include_router(routes_router)
app.include_router(realtime_router)


def _reveal_errors() -> bool:
    return (os.getenv("METROPATH_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }


@app.exception_handler(NetworkError)
async def network_error_handler(request: Request, exc: NetworkError) -> JSONResponse:
    """Bad or missing network data makes every route unusable: report it as such."""

    logging.getLogger("uvicorn.error").error(
        "Network data error on %s: %s", request.url.path, exc
    )
    return JSONResponse(
        status_code=503,
        content={"detail": f"Network data unavailable: {exc}"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if _reveal_errors() or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    """Serve the API; ``METROPATH_HOST`` and ``METROPATH_PORT`` override the bind."""

    uvicorn.run(
        app,
        host=os.getenv("METROPATH_HOST") or "127.0.0.1",
        port=int(os.getenv("METROPATH_PORT") or "8000"),
    )
