from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.browser import router as browser_router
from src.adapters.api.controllers.catalog import router as catalog_router
from src.adapters.api.controllers.dashboard import router as dashboard_router
from src.adapters.api.dependencies import get_config

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Vehicle Browser")
app.include_router(dashboard_router)
app.include_router(catalog_router)
app.include_router(browser_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the dashboard can display them.

    Starlette's default 500 handler may return plain text/HTML, which the
    dashboard script parses as JSON.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if get_config().reveal_errors or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
