"""Pydantic request and response models for the REST API.

Field names are snake_case in Python and camelCase on the wire, matching the
map description and event payload keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Map description ---

class PositionSchema(BaseModel):
    x: int
    y: int


class FoodSchema(BaseModel):
    x: int
    y: int
    value: int = 0


class NPCSchema(_CamelModel):
    name: str = "Stranger"
    npc_type: str | None = Field(None, alias="type")
    x: int
    y: int
    dialogs: list[str] = Field(default_factory=list)


class PredatorSchema(_CamelModel):
    name: str = "Predator"
    x: int
    y: int
    is_full: bool = Field(False, alias="isFull")


class BushSchema(_CamelModel):
    x: int
    y: int
    has_fox: bool = Field(False, alias="hasFox")


class MapDescription(_CamelModel):
    """Request body for ``POST /control/restart``.

    Only types are checked here. Missing or non-positive sizes and a missing
    NPC ``type`` are left for WorldBuilder to resolve, so a map means the same
    thing over HTTP as it does from a file.
    """

    width: int = 10
    height: int = 10
    pits: list[PositionSchema] = Field(default_factory=list)
    food: list[FoodSchema] = Field(default_factory=list)
    npcs: list[NPCSchema] = Field(default_factory=list)
    predators: list[PredatorSchema] = Field(default_factory=list)
    bushes: list[BushSchema] = Field(default_factory=list)

    def to_map_data(self) -> dict[str, Any]:
        """Return the plain dict form consumed by WorldBuilder.from_dict."""
        return self.model_dump(by_alias=True)


# --- State ---

class HedgehogSchema(BaseModel):
    position: PositionSchema
    energy: int
    score: int
    state: str


class NPCViewSchema(BaseModel):
    name: str
    x: int
    y: int
    kind: str


class WorldViewSchema(BaseModel):
    width: int
    height: int
    pits: list[PositionSchema] = Field(default_factory=list)
    food: list[FoodSchema] = Field(default_factory=list)
    bushes: list[BushSchema] = Field(default_factory=list)
    npcs: list[NPCViewSchema] = Field(default_factory=list)
    predators: list[PredatorSchema] = Field(default_factory=list)


class SurroundingsSchema(_CamelModel):
    npc_nearby: str | None = Field(None, alias="npcNearby")
    food_nearby: bool = Field(False, alias="foodNearby")
    predator_here: str | None = Field(None, alias="predatorHere")
    bush_here: bool = Field(False, alias="bushHere")
    bush_has_fox: bool = Field(False, alias="bushHasFox")


class GameStateResponse(_CamelModel):
    hedgehog: HedgehogSchema
    time_remaining: int = Field(alias="timeRemaining")
    is_game_over: bool = Field(alias="isGameOver")
    lives: int
    world: WorldViewSchema
    surroundings: SurroundingsSchema


# --- Events ---

class EventSchema(BaseModel):
    seq: int
    name: str
    payload: dict[str, Any] = Field(default_factory=dict)


class EventsResponse(_CamelModel):
    events: list[EventSchema] = Field(default_factory=list)
    next_seq: int = Field(0, alias="nextSeq")


# --- Commands ---

class WarningSchema(_CamelModel):
    message: str
    should_curl: bool = Field(alias="shouldCurl")
    is_warning: bool = Field(alias="isWarning")
    predator: str | None = None


class TalkSchema(BaseModel):
    npc: str
    dialog: str
    advice: str
    warning: WarningSchema | None = None


class CommandResponse(BaseModel):
    status: str
    message: str
    accepted: bool
    talk: TalkSchema | None = None
    state: GameStateResponse


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    lives: int
    running: bool


# --- Config ---

class ConfigResponse(BaseModel):
    seed: int
    max_energy: int
    normal_move_cost: int
    curled_move_cost: int
    max_time: int
    default_lives: int
    win_score: int
    pit_survival_chance: float
    curled_move_interval: int
    predator_move_interval: int
    predator_leash_radius: int
    npc_honesty_rate: float
    tick_interval: float
