"""Art parameters for the built-in splatter effects."""

from __future__ import annotations

from typing import Optional


# Effect ids present in the asset table.
EFFECT_IDS: tuple[int, ...] = (0, 1, 2, 3)

# Drawing parameters per effect id. ``spread`` is a fraction of the half-extent.
SPLATTER_DEFINITIONS: dict[int, dict] = {
    0: {
        "name": "ink",
        "color": (30, 30, 60),
        "droplets": 9,
        "spread": 0.85,
    },
    1: {
        "name": "paint",
        "color": (220, 60, 50),
        "droplets": 12,
        "spread": 0.9,
    },
    2: {
        "name": "slime",
        "color": (90, 200, 80),
        "droplets": 7,
        "spread": 0.7,
    },
    3: {
        "name": "water",
        "color": (80, 150, 230),
        "droplets": 14,
        "spread": 0.95,
    },
}


def get_splatter_definition(effect_id: int) -> Optional[dict]:
    """Get the drawing parameters for an effect id.

    Args:
        effect_id: The effect identifier.

    Returns:
        Definition dict or None if the id is not in the table.
    """
    return SPLATTER_DEFINITIONS.get(effect_id)
