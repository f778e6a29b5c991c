"""Splatter registry: effect id to Regular and Large frame sets."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from splatter_cache.assets import EFFECT_IDS
from splatter_cache.types import Bitmap, Splatter, SplatterSize, anchor_for

from .cache import FrameSetCache, OnceCell

logger = logging.getLogger(__name__)

# Effect id used when a caller asks for an id outside the table.
DEFAULT_EFFECT_ID = 0


class SplatterRegistry:
    """Builds one Splatter per effect id on first access."""

    def __init__(self, cache: Optional[FrameSetCache] = None):
        self.cache = cache or FrameSetCache()
        self._entries: dict[int, OnceCell[Splatter]] = {
            effect_id: OnceCell(self._builder(effect_id)) for effect_id in EFFECT_IDS
        }
        self._reported_ids: set[int] = set()

    def effect_id_for(self, effect_id: int) -> int:
        """Map an arbitrary effect id onto one present in the table.

        Unknown ids fall back to DEFAULT_EFFECT_ID. Each unknown id is logged
        the first time it is seen.
        """
        if effect_id in self._entries:
            return effect_id
        if effect_id not in self._reported_ids:
            self._reported_ids.add(effect_id)
            logger.debug(
                "Unknown splatter effect id %r, using %d", effect_id, DEFAULT_EFFECT_ID
            )
        return DEFAULT_EFFECT_ID

    def splatter(self, effect_id: int) -> Splatter:
        return self._entries[self.effect_id_for(effect_id)].get()

    def frame_of(self, effect_id: int, frame_index: int, size: SplatterSize) -> Bitmap:
        """Bitmap for one frame, holding the last frame past the end of the animation."""
        return self.splatter(effect_id).frame(frame_index, size)

    def anchor(self, x: float, y: float, size: SplatterSize) -> tuple[int, int]:
        return anchor_for(x, y, size)

    def warm_all(self, workers: int = 1) -> None:
        """Decode every frame set and build every Splatter."""
        self.cache.warm_all(workers=workers)
        for cell in self._entries.values():
            cell.get()

    def _builder(self, effect_id: int) -> Callable[[], Splatter]:
        def build() -> Splatter:
            return Splatter(
                effect_id=effect_id,
                regular=self.cache.get(effect_id, SplatterSize.REGULAR),
                large=self.cache.get(effect_id, SplatterSize.LARGE),
            )

        return build
