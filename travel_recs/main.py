"""
Travel Recs — FastAPI app factory with background startup data loading.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_recs import __version__
from travel_recs.api.router_meta import router as meta_router
from travel_recs.api.router_search import page_router, router as search_router
from travel_recs.data.store import TravelSession
from travel_recs.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _lifespan_for(session: TravelSession | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the session and kick off the initial load without blocking startup."""
        app.state.session = session or TravelSession()
        logger.info("Data source: %s", app.state.session.source)

        preload = asyncio.create_task(app.state.session.preload())
        yield
        if not preload.done():
            preload.cancel()

    return lifespan


def create_app(session: TravelSession | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Travel Recs API",
        description="Travel recommendation search — beaches, temples, and cities by country",
        version=__version__,
        lifespan=_lifespan_for(session),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(page_router)
    app.include_router(search_router)
    app.include_router(meta_router)

    return app


app = create_app()
