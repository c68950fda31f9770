"""Built-in map descriptions."""

from __future__ import annotations

import copy
from typing import Any

DEFAULT_MAP: dict[str, Any] = {
    "width": 20,
    "height": 5,
    "pits": [
        {"x": 4, "y": 2},
        {"x": 9, "y": 0},
        {"x": 13, "y": 3},
        {"x": 17, "y": 1},
    ],
    "food": [
        {"x": 1, "y": 0, "value": 20},
        {"x": 3, "y": 1, "value": 15},
        {"x": 6, "y": 4, "value": 30},
        {"x": 8, "y": 2, "value": 25},
        {"x": 11, "y": 1, "value": 40},
        {"x": 12, "y": 4, "value": 20},
        {"x": 15, "y": 2, "value": 50},
        {"x": 16, "y": 4, "value": 35},
        {"x": 19, "y": 0, "value": 60},
    ],
    "npcs": [
        {
            "name": "Owl",
            "type": "honest",
            "x": 2,
            "y": 2,
            "dialogs": [
                "Hoo! The wolf patrols the middle of the forest.",
                "Curl up when danger is near, little one.",
            ],
        },
        {
            "name": "\U0001F98A Fox",
            "type": "deceptive",
            "x": 9,
            "y": 3,
            "dialogs": [
                "The path ahead is perfectly safe. Trust me.",
                "Those bushes hide the sweetest berries.",
            ],
        },
        {
            "name": "Squirrel",
            "type": "honest",
            "x": 14,
            "y": 0,
            "dialogs": ["Acorns everywhere! Watch your step near the pits."],
        },
        {
            "name": "Magpie",
            "type": "deceptive",
            "x": 18,
            "y": 3,
            "dialogs": ["Shiny things lie east. Or west. Who knows?"],
        },
    ],
    "predators": [
        {"name": "Wolf", "x": 7, "y": 1},
        {"name": "Lynx", "x": 16, "y": 3},
        {"name": "Bear", "x": 12, "y": 2, "isFull": True},
    ],
    "bushes": [
        {"x": 5, "y": 0, "hasFox": False},
        {"x": 10, "y": 3, "hasFox": True},
        {"x": 18, "y": 2, "hasFox": False},
    ],
}


def default_map() -> dict[str, Any]:
    """Return a private copy of the built-in forest."""
    return copy.deepcopy(DEFAULT_MAP)
