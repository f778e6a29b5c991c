"""Lazily decoded, process-lifetime frame set cache."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Generic, Optional, TypeVar

from splatter_cache.assets import EFFECT_IDS, AssetSource, GeneratedAssetSource
from splatter_cache.errors import SplatterAssetError
from splatter_cache.types import FRAME_COUNT, Bitmap, FrameSet, SplatterSize

from .decoder import decode

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class OnceCell(Generic[T]):
    """Holds a value computed at most once.

    The first caller of ``get`` runs the factory while holding the cell's
    lock; concurrent callers block on that lock and then see the published
    value. Once set, reads do not take the lock. A factory error is stored;
    every later ``get`` raises a fresh SplatterAssetError chained to it
    without running the factory again.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._value = _UNSET
        self._error: Optional[BaseException] = None

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value

        with self._lock:
            if self._error is not None:
                raise SplatterAssetError(
                    f"Initialization failed earlier: {self._error}"
                ) from self._error
            if self._value is _UNSET:
                try:
                    self._value = self._factory()
                except Exception as exc:
                    self._error = exc
                    raise
            return self._value


class FrameSetCache:
    """One FrameSet per (effect id, size), decoded on first access.

    Every key has its own OnceCell, so different keys decode in parallel
    while callers asking for the same key wait for a single decode.
    """

    def __init__(
        self,
        source: Optional[AssetSource] = None,
        decoder: Callable[[str], Bitmap] = decode,
    ):
        """Initialize the cache.

        Args:
            source: Encoded asset table. Defaults to the generated table.
            decoder: Turns one encoded string into a Bitmap.
        """
        self._source = source or GeneratedAssetSource()
        self._decoder = decoder
        self._decode_count = 0
        self._count_lock = threading.Lock()
        self._cells: dict[tuple[int, SplatterSize], OnceCell[FrameSet]] = {
            (effect_id, size): OnceCell(self._builder(effect_id, size))
            for effect_id in EFFECT_IDS
            for size in SplatterSize
        }

    @property
    def keys(self) -> list[tuple[int, SplatterSize]]:
        return list(self._cells)

    @property
    def decode_count(self) -> int:
        """Number of frames decoded so far."""
        return self._decode_count

    @property
    def is_warm(self) -> bool:
        return all(cell.initialized for cell in self._cells.values())

    def is_initialized(self, effect_id: int, size: SplatterSize) -> bool:
        return self._cells[(effect_id, size)].initialized

    def get(self, effect_id: int, size: SplatterSize) -> FrameSet:
        """Return the shared FrameSet for a key, decoding it on first use.

        Raises:
            KeyError: The key is not part of the asset table layout.
            SplatterAssetError: One of the key's frames failed to decode.
        """
        return self._cells[(effect_id, size)].get()

    def warm_all(self, workers: int = 1) -> None:
        """Decode every key now instead of on first draw.

        Args:
            workers: Threads used to decode keys in parallel. 1 decodes in order.
        """
        start = time.perf_counter()
        logger.info("Warming %d splatter frame sets", len(self._cells))
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # list() re-raises the first decode failure here
                list(pool.map(lambda cell: cell.get(), self._cells.values()))
        else:
            for cell in self._cells.values():
                cell.get()
        logger.info(
            "Splatter frame sets warm in %.1fms", (time.perf_counter() - start) * 1000
        )

    def _builder(self, effect_id: int, size: SplatterSize) -> Callable[[], FrameSet]:
        def build() -> FrameSet:
            start = time.perf_counter()
            frames = tuple(
                self._decoder(self._source.encoded(effect_id, size, frame_index))
                for frame_index in range(FRAME_COUNT)
            )
            with self._count_lock:
                self._decode_count += len(frames)
            logger.debug(
                "Decoded splatter %d/%s in %.1fms",
                effect_id,
                size.name,
                (time.perf_counter() - start) * 1000,
            )
            return FrameSet(frames)

        return build
