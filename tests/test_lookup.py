"""Tests for the lookup entry point."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import splatter_cache
from conftest import CountingDecoder
from splatter_cache.assets import EFFECT_IDS
from splatter_cache.config import SplatterConfig
from splatter_cache.renderer import (
    FrameSetCache,
    SplatterLookup,
    SplatterRegistry,
    get_default_lookup,
    reset_default_lookup,
)
from splatter_cache.types import FRAME_COUNT, SplatterSize


class TestResolve:
    """Tests for SplatterLookup.resolve."""

    def test_returns_bitmap_and_anchor(self, lookup, registry):
        bitmap, anchor = lookup.resolve(1, 2, SplatterSize.REGULAR, 200.0, 200.0)
        assert bitmap is registry.frame_of(1, 2, SplatterSize.REGULAR)
        assert anchor == (80, 80)

    def test_large_anchor(self, lookup):
        bitmap, anchor = lookup.resolve(0, 0, SplatterSize.LARGE, 200.0, 200.0)
        assert bitmap.size == (400, 400)
        assert anchor == (0, 0)

    def test_anchor_floors_first(self, lookup):
        _, anchor = lookup.resolve(3, 0, SplatterSize.REGULAR, 150.7, 150.7)
        assert anchor == (30, 30)

    def test_anchor_centres_bitmap(self, lookup):
        """Test the bitmap centre lands on the target point."""
        for size in SplatterSize:
            bitmap, (left, top) = lookup.resolve(2, 1, size, 512.0, 384.0)
            assert left + bitmap.width // 2 == 512
            assert top + bitmap.height // 2 == 384

    @pytest.mark.parametrize("x", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_coordinates_resolve(self, lookup, x):
        """Test non-finite coordinates still resolve to a bitmap and anchor."""
        bitmap, (left, top) = lookup.resolve(0, 0, SplatterSize.REGULAR, x, 10.0)
        assert bitmap.size == (240, 240)
        assert isinstance(left, int)
        assert top == -110

    @pytest.mark.parametrize("frame_index", [4, 8, 250])
    def test_frame_past_end_holds_last(self, lookup, frame_index):
        last, _ = lookup.resolve(2, FRAME_COUNT - 1, SplatterSize.LARGE, 0.0, 0.0)
        bitmap, _ = lookup.resolve(2, frame_index, SplatterSize.LARGE, 0.0, 0.0)
        assert bitmap is last

    def test_unknown_effect_uses_effect_zero(self, lookup):
        for size in SplatterSize:
            for frame_index in range(FRAME_COUNT):
                fallback, anchor = lookup.resolve(99, frame_index, size, 10.0, 10.0)
                expected, expected_anchor = lookup.resolve(0, frame_index, size, 10.0, 10.0)
                assert fallback is expected
                assert anchor == expected_anchor

    def test_resolve_is_lazy(self, lookup, registry, counting_decoder):
        lookup.resolve(1, 0, SplatterSize.REGULAR, 0.0, 0.0)
        # Splatter 1 needs both of its sizes, nothing else
        assert counting_decoder.calls == 2 * FRAME_COUNT
        assert not registry.cache.is_initialized(0, SplatterSize.REGULAR)

    def test_no_decode_after_warm_all(self, lookup, counting_decoder):
        lookup.warm_all()
        calls = counting_decoder.calls
        assert calls == len(EFFECT_IDS) * len(SplatterSize) * FRAME_COUNT

        for effect_id in (*EFFECT_IDS, 99):
            for size in SplatterSize:
                for frame_index in range(FRAME_COUNT + 2):
                    lookup.resolve(effect_id, frame_index, size, 1.5, 2.5)
        assert counting_decoder.calls == calls

    def test_concurrent_first_resolve_shares_bitmaps(self, static_source):
        decoder = CountingDecoder(delay=0.005)
        lookup = SplatterLookup(SplatterRegistry(FrameSetCache(static_source, decoder=decoder)))
        barrier = threading.Barrier(6)

        def worker(_):
            barrier.wait(timeout=5)
            return lookup.resolve(3, 1, SplatterSize.LARGE, 300.0, 300.0)

        with ThreadPoolExecutor(max_workers=6) as pool:
            results = list(pool.map(worker, range(6)))

        first_bitmap, first_anchor = results[0]
        for bitmap, anchor in results:
            assert bitmap is first_bitmap
            assert anchor == first_anchor == (100, 100)
        assert decoder.calls == 2 * FRAME_COUNT

    def test_independent_caches_decode_identically(self, static_source):
        first = SplatterLookup(SplatterRegistry(FrameSetCache(static_source)))
        second = SplatterLookup(SplatterRegistry(FrameSetCache(static_source)))
        a, _ = first.resolve(2, 3, SplatterSize.REGULAR, 0.0, 0.0)
        b, _ = second.resolve(2, 3, SplatterSize.REGULAR, 0.0, 0.0)
        assert a is not b
        assert a.size == b.size
        assert a.tobytes() == b.tobytes()

    def test_eager_warm_config(self, registry, frame_cache):
        SplatterLookup(registry, config=SplatterConfig(eager_warm=True, warm_workers=2))
        assert frame_cache.is_warm


class TestDefaultLookup:
    """Tests for the process-wide lookup."""

    def test_default_is_shared(self):
        assert get_default_lookup() is get_default_lookup()

    def test_reset_creates_new_instance(self):
        first = get_default_lookup()
        reset_default_lookup()
        assert get_default_lookup() is not first

    def test_concurrent_creation_yields_one_instance(self):
        barrier = threading.Barrier(8)

        def worker(_):
            barrier.wait(timeout=5)
            return get_default_lookup()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(worker, range(8)))
        assert all(r is results[0] for r in results)

    def test_default_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SPLATTER_CACHE_WARM_WORKERS", "3")
        assert get_default_lookup().config.warm_workers == 3

    def test_module_level_resolve(self):
        bitmap, anchor = splatter_cache.resolve(2, 7, SplatterSize.REGULAR, 200.0, 200.0)
        cache = get_default_lookup().registry.cache
        assert bitmap is cache.get(2, SplatterSize.REGULAR).last
        assert anchor == (80, 80)
        assert not cache.is_initialized(1, SplatterSize.REGULAR)

    def test_precompute_is_warm_all(self):
        assert splatter_cache.precompute is splatter_cache.warm_all

    def test_module_level_warm_all(self):
        splatter_cache.warm_all()
        assert get_default_lookup().registry.cache.is_warm
