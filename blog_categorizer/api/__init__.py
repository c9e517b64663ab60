# api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import routes_categorize, routes_health


def init_routers(app: FastAPI) -> None:
    """Include all API routers into the main app."""
    app.include_router(routes_categorize.router)
    app.include_router(routes_health.router)


def init_exception_handlers(app: FastAPI) -> None:
    """Report unreadable request bodies as client input errors."""

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": routes_categorize.INPUT_REQUIRED})
