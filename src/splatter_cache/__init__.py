"""Lazily decoded splatter effect bitmaps for the renderer."""

from __future__ import annotations

from .config import SplatterConfig
from .errors import SplatterAssetError
from .renderer import (
    SplatterLookup,
    precompute,
    reset_default_lookup,
    resolve,
    warm_all,
)
from .types import Bitmap, FrameSet, Splatter, SplatterSize

__all__ = [
    "SplatterConfig",
    "SplatterAssetError",
    "SplatterLookup",
    "precompute",
    "reset_default_lookup",
    "resolve",
    "warm_all",
    "Bitmap",
    "FrameSet",
    "Splatter",
    "SplatterSize",
]
