#!/usr/bin/env python3
"""Decode every splatter frame and save it as a PNG for inspection."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from splatter_cache import SplatterConfig, SplatterLookup, SplatterSize
from splatter_cache.assets import EFFECT_IDS


def main(argv=None):
    """Warm the cache and write each frame to <output>/<effect>_<size>_<frame>.png."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent.parent / "assets" / "splatters",
        help="Directory to write PNG files into",
    )
    parser.add_argument("--workers", type=int, default=4, help="Decode threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    lookup = SplatterLookup(config=SplatterConfig(warm_workers=args.workers))
    lookup.warm_all()

    args.output.mkdir(parents=True, exist_ok=True)
    written = 0
    for effect_id in EFFECT_IDS:
        splatter = lookup.registry.splatter(effect_id)
        for size in SplatterSize:
            for frame_index, bitmap in enumerate(splatter.frames(size)):
                path = args.output / f"{effect_id}_{size.name.lower()}_{frame_index}.png"
                bitmap.to_image().save(path)
                written += 1

    print(f"Wrote {written} frames to {args.output}")


if __name__ == "__main__":
    main()
