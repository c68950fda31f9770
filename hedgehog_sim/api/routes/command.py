"""POST /api/v1/command/... — player commands."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from hedgehog_sim.api.dependencies import get_session_manager
from hedgehog_sim.api.routes.state import build_state_response
from hedgehog_sim.api.schemas import CommandResponse, TalkSchema, WarningSchema
from hedgehog_sim.api.session_manager import SessionManager

router = APIRouter()


class CommandAction(str, Enum):
    collect = "collect"
    talk = "talk"
    curl = "curl"
    uncurl = "uncurl"
    tick = "tick"


def _respond(manager: SessionManager, accepted: bool, message: str, talk: TalkSchema | None = None) -> CommandResponse:
    return CommandResponse(
        status="ok" if accepted else "noop",
        message=message,
        accepted=accepted,
        talk=talk,
        state=build_state_response(manager),
    )


@router.post("/command/move/{direction}", response_model=CommandResponse)
def move(
    direction: str,
    manager: SessionManager = Depends(get_session_manager),
) -> CommandResponse:
    moved = manager.move(direction)
    message = f"Moved {direction}." if moved else f"Did not move {direction}."
    return _respond(manager, moved, message)


@router.post("/command/{action}", response_model=CommandResponse)
def command(
    action: CommandAction,
    manager: SessionManager = Depends(get_session_manager),
) -> CommandResponse:
    match action:
        case CommandAction.collect:
            ok = manager.collect_food()
            return _respond(manager, ok, "Food collected." if ok else "No food within reach.")

        case CommandAction.talk:
            result = manager.talk()
            if result is None:
                return _respond(manager, False, "Nobody to talk to.")
            warning = WarningSchema(**result.warning.to_dict()) if result.warning else None
            talk = TalkSchema(
                npc=result.npc, dialog=result.dialog, advice=result.advice, warning=warning,
            )
            return _respond(manager, True, f"Talked to {result.npc}.", talk)

        case CommandAction.curl:
            ok = manager.curl()
            return _respond(manager, ok, "Curled up." if ok else "Already curled.")

        case CommandAction.uncurl:
            ok = manager.uncurl()
            return _respond(manager, ok, "Uncurled." if ok else "Not curled.")

        case CommandAction.tick:
            moved = manager.tick()
            return _respond(manager, True, f"{moved} predator(s) moved.")
