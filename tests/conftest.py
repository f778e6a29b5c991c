"""Pytest configuration and fixtures."""

from __future__ import annotations

import threading
import time

import pytest

from splatter_cache.assets import GeneratedAssetSource, StaticAssetSource
from splatter_cache.renderer import (
    FrameSetCache,
    SplatterLookup,
    SplatterRegistry,
    decode,
    reset_default_lookup,
)


class CountingDecoder:
    """Wraps decode() and counts calls, optionally slowing each one down."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, encoded: str):
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return decode(encoded)


@pytest.fixture(scope="session")
def static_source() -> StaticAssetSource:
    """The generated asset table, rendered once per test session."""
    return GeneratedAssetSource().snapshot()


@pytest.fixture
def counting_decoder() -> CountingDecoder:
    return CountingDecoder()


@pytest.fixture
def frame_cache(static_source, counting_decoder) -> FrameSetCache:
    """A fresh cache over the session asset table."""
    return FrameSetCache(static_source, decoder=counting_decoder)


@pytest.fixture
def registry(frame_cache) -> SplatterRegistry:
    return SplatterRegistry(frame_cache)


@pytest.fixture
def lookup(registry) -> SplatterLookup:
    return SplatterLookup(registry)


@pytest.fixture(autouse=True)
def clean_default_lookup(monkeypatch):
    """Keep the process-wide lookup and its environment isolated per test."""
    monkeypatch.delenv("SPLATTER_CACHE_EAGER_WARM", raising=False)
    monkeypatch.delenv("SPLATTER_CACHE_WARM_WORKERS", raising=False)
    reset_default_lookup()
    yield
    reset_default_lookup()
