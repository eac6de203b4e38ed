"""
GATE Tutor FastAPI Application Entry Point.

Run with: uvicorn gate_tutor.main:app --reload
or:       gate-tutor
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gate_tutor.api.routes import chat, health, schedule
from gate_tutor.config import Settings, get_settings
from gate_tutor.context import build_context

STATIC_DIR = Path(__file__).parent / "static"


def create_app(
    settings: Settings | None = None,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the application.

    http_transport replaces the transport used for Gemini calls (tests pass an
    httpx.MockTransport here).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager for startup/shutdown."""
        # Startup
        app.state.context = await build_context(settings, http_transport=http_transport)
        yield
        # Shutdown
        await app.state.context.close()

    app = FastAPI(
        title=settings.app_name,
        description="GATE exam tutor chat + study schedule API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(chat.router)
    app.include_router(schedule.router)
    app.include_router(health.router)

    # Single-page client; mounted last so /api routes win
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="ui")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(
        "gate_tutor.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
