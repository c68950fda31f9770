"""POST /api/v1/control/... — session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Body, Depends, HTTPException

from hedgehog_sim.api.dependencies import get_session_manager
from hedgehog_sim.api.schemas import ControlResponse, MapDescription
from hedgehog_sim.api.session_manager import SessionManager

router = APIRouter()


class TickerAction(str, Enum):
    start = "start"
    stop = "stop"


def _control(manager: SessionManager, status: str, message: str) -> ControlResponse:
    return ControlResponse(
        status=status, message=message, lives=manager.lives, running=manager.running,
    )


@router.post("/control/restart", response_model=ControlResponse)
def restart(
    body: MapDescription | None = Body(None),
    manager: SessionManager = Depends(get_session_manager),
) -> ControlResponse:
    map_data = body.to_map_data() if body is not None else None
    if not manager.restart(map_data):
        raise HTTPException(
            status_code=409,
            detail="No lives left. Restart again to begin a new game.",
        )
    return _control(manager, "ok", "Session restarted.")


@router.post("/control/{action}", response_model=ControlResponse)
def ticker(
    action: TickerAction,
    manager: SessionManager = Depends(get_session_manager),
) -> ControlResponse:
    match action:
        case TickerAction.start:
            if manager.running:
                return _control(manager, "noop", "Ticker already running.")
            manager.start()
            return _control(manager, "ok", "Ticker started.")

        case TickerAction.stop:
            if not manager.running:
                return _control(manager, "noop", "Ticker not running.")
            manager.stop()
            return _control(manager, "ok", "Ticker stopped.")
