"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hedgehog_sim.api.dependencies import set_session_manager
from hedgehog_sim.api.routes import api_router
from hedgehog_sim.api.session_manager import SessionManager
from hedgehog_sim.config import GameConfig
from hedgehog_sim.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: GameConfig | None = None,
    map_data: Mapping[str, Any] | None = None,
    autostart: bool = True,
) -> FastAPI:
    """Build and return the fully-configured FastAPI application.

    With ``autostart`` the predator ticker starts with the server; otherwise
    predators only move on ``POST /command/tick`` or ``/control/start``.
    """
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = SessionManager(_config, map_data)
        set_session_manager(manager)
        if autostart:
            manager.start()
        logger.info("API server started (seed=%d).", manager.seed)
        yield
        manager.stop()
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Hedgehog Forest",
        description=(
            "Turn-based hedgehog survival game.\n\n"
            "## API Groups\n\n"
            "- **State** — Hedgehog, world layout and the event feed\n"
            "- **Command** — Player moves and actions\n"
            "- **Control** — Restart with lives, predator ticker start/stop\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Current session state and events, polled by the UI."},
            {"name": "Command", "description": "Move, collect food, talk, curl, uncurl and manual predator ticks."},
            {"name": "Control", "description": "Lives-aware restart and the background predator ticker."},
            {"name": "Config", "description": "Read-only game tunables."},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
