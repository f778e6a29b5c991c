"""Encoded splatter asset tables."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional, Protocol

from splatter_cache.errors import SplatterAssetError
from splatter_cache.types import FRAME_COUNT, SplatterSize

from .definitions import EFFECT_IDS
from .generator import SplatterArtGenerator

AssetKey = tuple[int, SplatterSize, int]  # effect id, size, frame index


def asset_keys() -> Iterator[AssetKey]:
    """Every key the asset table layout requires, in table order."""
    for effect_id in EFFECT_IDS:
        for size in SplatterSize:
            for frame_index in range(FRAME_COUNT):
                yield (effect_id, size, frame_index)


class AssetSource(Protocol):
    """Anything that can hand out the encoded text of one splatter frame."""

    def encoded(self, effect_id: int, size: SplatterSize, frame_index: int) -> str:
        ...


class GeneratedAssetSource:
    """Asset table rendered on demand by SplatterArtGenerator."""

    def __init__(self, generator: Optional[SplatterArtGenerator] = None):
        self._generator = generator or SplatterArtGenerator()

    def encoded(self, effect_id: int, size: SplatterSize, frame_index: int) -> str:
        return self._generator.encode_frame(effect_id, size, frame_index)

    def snapshot(self) -> StaticAssetSource:
        """Render the whole table once into a StaticAssetSource."""
        return StaticAssetSource({key: self.encoded(*key) for key in asset_keys()})


class StaticAssetSource:
    """A fixed table of encoded assets.

    The table must cover exactly the layout returned by ``asset_keys()``.
    """

    def __init__(self, table: Mapping[AssetKey, str]):
        expected = set(asset_keys())
        actual = set(table)
        if actual != expected:
            missing = sorted(_describe(k) for k in expected - actual)
            extra = sorted(_describe(k) for k in actual - expected)
            raise SplatterAssetError(
                f"Asset table layout mismatch: missing={missing} extra={extra}"
            )
        self._table = dict(table)

    def encoded(self, effect_id: int, size: SplatterSize, frame_index: int) -> str:
        return self._table[(effect_id, size, frame_index)]

    def replace(self, key: AssetKey, encoded: str) -> StaticAssetSource:
        """Return a copy of this table with one entry swapped out."""
        table = dict(self._table)
        table[key] = encoded
        return StaticAssetSource(table)


def _describe(key) -> str:
    effect_id, size, frame_index = key
    name = size.name if isinstance(size, SplatterSize) else repr(size)
    return f"{effect_id}/{name}/{frame_index}"
