"""
Main entrypoints for the Investment Portfolio API.

This module assembles both FastAPI applications.  ``create_app``
builds the investment planner service and ``create_portfolio_app``
the portfolio service; each owns its own in‑memory ``Store``.  Both
are instantiated at import time as ``app`` and ``portfolio_app`` so
they can be served directly, e.g.::

    uvicorn portfolio_api.app.main:app --port 8080
    uvicorn portfolio_api.app.main:portfolio_app --port 8081

``run.py`` at the project root starts both in one process.
"""

import logging
import math
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import planner_router, portfolio_router
from .core.config import settings
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .core.store import Store

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Render store failures as ``{"message": ...}`` with their status code."""
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def _json_safe(value: Any) -> Any:
    """Replace non‑finite floats, which JSON cannot carry, with their text form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer undecodable bodies and unparsable parameters with 400.

    ``message`` joins the parser's messages; ``detail`` keeps the full
    error list in FastAPI's usual shape.
    """
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}" for error in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "detail": _json_safe(jsonable_encoder(errors))},
    )


def _build_app(title: str, router: APIRouter, store: Store) -> FastAPI:
    # Initialise logging before anything else so that handlers below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=title, version=settings.api_version)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router, prefix="/api")
    return app


def create_app(store: Optional[Store] = None) -> FastAPI:
    """Create the investment planner service.

    Parameters
    ----------
    store : Optional[Store]
        Store to serve.  Defaults to a new id‑keyed store, seeded with
        the demo assets when ``settings.seed_assets`` is set.

    Returns
    -------
    FastAPI
        A configured application exposing contributions, suggestions,
        goals, questions, answers and id‑keyed assets.
    """
    if store is None:
        store = Store(asset_key="id", seed=settings.seed_assets)
    return _build_app(settings.project_name, planner_router, store)


def create_portfolio_app(store: Optional[Store] = None) -> FastAPI:
    """Create the portfolio service (ticker‑keyed assets and ``/api/portfolio``)."""
    if store is None:
        store = Store(asset_key="ticker", seed=settings.seed_assets)
    return _build_app(f"{settings.project_name} (portfolio)", portfolio_router, store)


# Create the application instances at import time so that tools such as
# uvicorn can discover them without calling the factories manually.
app = create_app()
portfolio_app = create_portfolio_app()
