"""Encoded asset data for the splatter cache."""

from __future__ import annotations

from .definitions import (
    EFFECT_IDS,
    SPLATTER_DEFINITIONS,
    get_splatter_definition,
)
from .generator import SplatterArtGenerator, encode_png
from .source import (
    AssetKey,
    AssetSource,
    GeneratedAssetSource,
    StaticAssetSource,
    asset_keys,
)

__all__ = [
    "EFFECT_IDS",
    "SPLATTER_DEFINITIONS",
    "get_splatter_definition",
    "SplatterArtGenerator",
    "encode_png",
    "AssetKey",
    "AssetSource",
    "GeneratedAssetSource",
    "StaticAssetSource",
    "asset_keys",
]
