"""Decoding, caching and lookup of splatter bitmaps."""

from __future__ import annotations

from .decoder import decode
from .cache import FrameSetCache, OnceCell
from .registry import DEFAULT_EFFECT_ID, SplatterRegistry
from .lookup import (
    SplatterLookup,
    get_default_lookup,
    precompute,
    reset_default_lookup,
    resolve,
    warm_all,
)

__all__ = [
    "decode",
    "FrameSetCache",
    "OnceCell",
    "DEFAULT_EFFECT_ID",
    "SplatterRegistry",
    "SplatterLookup",
    "get_default_lookup",
    "precompute",
    "reset_default_lookup",
    "resolve",
    "warm_all",
]
