"""GET /api/v1/state and /api/v1/events — polled by the UI."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from hedgehog_sim.api.dependencies import get_session_manager
from hedgehog_sim.api.schemas import (
    BushSchema,
    EventSchema,
    EventsResponse,
    FoodSchema,
    GameStateResponse,
    HedgehogSchema,
    NPCViewSchema,
    PositionSchema,
    PredatorSchema,
    SurroundingsSchema,
    WorldViewSchema,
)
from hedgehog_sim.api.session_manager import SessionManager

router = APIRouter()


def build_state_response(manager: SessionManager) -> GameStateResponse:
    snap, view, near = manager.state_bundle()

    world = WorldViewSchema(
        width=view.width,
        height=view.height,
        pits=[PositionSchema(x=x, y=y) for x, y in view.pits],
        food=[FoodSchema(x=x, y=y, value=v) for x, y, v in view.food],
        bushes=[BushSchema(x=x, y=y, has_fox=fox) for x, y, fox in view.bushes],
        npcs=[NPCViewSchema(name=n, x=x, y=y, kind=k) for n, x, y, k in view.npcs],
        predators=[
            PredatorSchema(name=n, x=x, y=y, is_full=full) for n, x, y, full in view.predators
        ],
    )
    return GameStateResponse(
        hedgehog=HedgehogSchema(
            position=PositionSchema(x=snap.position.x, y=snap.position.y),
            energy=snap.energy,
            score=snap.score,
            state=snap.state,
        ),
        time_remaining=snap.time_remaining,
        is_game_over=snap.is_game_over,
        lives=snap.lives,
        world=world,
        surroundings=SurroundingsSchema(
            npc_nearby=near.npc_nearby,
            food_nearby=near.food_nearby,
            predator_here=near.predator_here,
            bush_here=near.bush_here,
            bush_has_fox=near.bush_has_fox,
        ),
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(
    manager: SessionManager = Depends(get_session_manager),
) -> GameStateResponse:
    return build_state_response(manager)


@router.get("/events", response_model=EventsResponse)
def get_events(
    since: int = Query(0, ge=0, description="Only return events with seq >= since"),
    manager: SessionManager = Depends(get_session_manager),
) -> EventsResponse:
    log = manager.event_log
    events = [
        EventSchema(seq=ev.seq, name=ev.name, payload=ev.payload)
        for ev in log.since(since)
    ]
    return EventsResponse(events=events, next_seq=log.next_seq)
