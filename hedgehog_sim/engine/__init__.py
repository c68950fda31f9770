"""Engine layer: event bus and turn resolution."""

from hedgehog_sim.engine.autoplay import Autoplayer
from hedgehog_sim.engine.event_bus import EventBus
from hedgehog_sim.engine.game_controller import GameController, Surroundings, TalkResult

__all__ = ["Autoplayer", "EventBus", "GameController", "Surroundings", "TalkResult"]
