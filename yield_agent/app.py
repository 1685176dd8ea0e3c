"""Application factory for the Yield Agent FastAPI backend."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .catalog import validate_catalog
from .config import get_settings
from .routers import plans


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance.

    The strategy catalog is checked here so a broken catalog fails at
    startup instead of during a request.
    """
    validate_catalog()
    settings = get_settings()
    logging.getLogger("yield_agent").setLevel(settings.log_level_number)

    app = FastAPI(
        title="Yield Agent Backend",
        version="0.1.0",
        description="Turns a monetization profile into a ranked 90-day commercialization plan.",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_origin_regex=r"http://localhost:\d+$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.include_router(plans.router)
    return app


app = create_app()
