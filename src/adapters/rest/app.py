"""
FastAPI application: REST adapter for the Proverbs Agent.

Usage:
    python run_api.py

Or directly:
    uvicorn adapters.rest.app:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure src/ is on sys.path when invoked via uvicorn directly
_src_dir = Path(__file__).resolve().parent.parent.parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from infrastructure.config import Settings
from infrastructure.logging_setup import configure_logging
from factory import ServiceFactory
from adapters.rest.dependencies import set_factory
from adapters.rest.routers import agent, state

__version__ = "0.1.0"


def create_app(factory: Optional[ServiceFactory] = None) -> FastAPI:
    """Build the FastAPI app.

    Without an explicit factory, one is built from the environment during
    startup. A missing model credential raises ConfigurationError there, so
    the server never starts accepting requests.
    """

    config = factory.config if factory is not None else Settings.from_env(
        project_root=_src_dir.parent,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(config.log_level)
        set_factory(factory if factory is not None else ServiceFactory(config))
        yield
        set_factory(None)

    app = FastAPI(
        title="Proverbs Agent",
        version=__version__,
        description="Conversational agent that manages a shared list of proverbs.",
        lifespan=lifespan,
    )

    # CORS: permissive for development; set CORS_ORIGINS in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(agent.router)
    app.include_router(state.router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
