"""Lookup entry point used by the drawing code."""

from __future__ import annotations

import threading
from typing import Optional

from splatter_cache.config import SplatterConfig
from splatter_cache.types import Bitmap, SplatterSize

from .registry import SplatterRegistry


class SplatterLookup:
    """Resolves a splatter draw request to a bitmap and its top-left anchor."""

    def __init__(
        self,
        registry: Optional[SplatterRegistry] = None,
        config: Optional[SplatterConfig] = None,
    ):
        self.registry = registry or SplatterRegistry()
        self.config = config or SplatterConfig()
        if self.config.eager_warm:
            self.warm_all()

    def resolve(
        self,
        effect_id: int,
        frame_index: int,
        size: SplatterSize,
        x: float,
        y: float,
    ) -> tuple[Bitmap, tuple[int, int]]:
        """Find the bitmap to draw and where to draw it.

        Args:
            effect_id: Effect identifier. Unknown ids use effect 0.
            frame_index: Animation frame. Indices past the end hold the last frame.
            size: Size variant.
            x: Target centre x.
            y: Target centre y.

        Returns:
            The shared Bitmap and the (left, top) pixel to draw it at.
        """
        bitmap = self.registry.frame_of(effect_id, frame_index, size)
        return bitmap, self.registry.anchor(x, y, size)

    def warm_all(self) -> None:
        """Decode every splatter now so the first draw pays no decode cost."""
        self.registry.warm_all(workers=self.config.warm_workers)


_DEFAULT_LOCK = threading.Lock()
_DEFAULT_LOOKUP: Optional[SplatterLookup] = None


def get_default_lookup() -> SplatterLookup:
    """Return the process-wide SplatterLookup, creating it on first call."""
    global _DEFAULT_LOOKUP
    if _DEFAULT_LOOKUP is not None:
        return _DEFAULT_LOOKUP

    with _DEFAULT_LOCK:
        if _DEFAULT_LOOKUP is None:
            _DEFAULT_LOOKUP = SplatterLookup(config=SplatterConfig.from_env())

    return _DEFAULT_LOOKUP


def reset_default_lookup() -> None:
    """Drop the process-wide lookup. Intended for tests."""
    global _DEFAULT_LOOKUP
    with _DEFAULT_LOCK:
        _DEFAULT_LOOKUP = None


def resolve(
    effect_id: int,
    frame_index: int,
    size: SplatterSize,
    x: float,
    y: float,
) -> tuple[Bitmap, tuple[int, int]]:
    """Resolve a draw request against the process-wide lookup."""
    return get_default_lookup().resolve(effect_id, frame_index, size, x, y)


def warm_all() -> None:
    """Decode every splatter in the process-wide lookup."""
    get_default_lookup().warm_all()


precompute = warm_all
