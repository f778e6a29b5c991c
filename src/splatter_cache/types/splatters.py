"""Splatter image types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np
from PIL import Image

# Every bitmap is stored in this mode regardless of the encoded format.
PIXEL_MODE = "RGBA"

# Frames per animation, fixed by the asset table layout.
FRAME_COUNT = 4


class SplatterSize(Enum):
    """Render scales a splatter can be drawn at."""

    REGULAR = 0
    LARGE = 1

    @property
    def half_extent(self) -> int:
        """Distance from the bitmap centre to its left and top edges."""
        return _HALF_EXTENTS[self]

    @property
    def extent(self) -> int:
        """Side length of the square bitmap."""
        return 2 * self.half_extent


_HALF_EXTENTS: dict[SplatterSize, int] = {
    SplatterSize.REGULAR: 120,
    SplatterSize.LARGE: 200,
}


# Anchors are clamped to the signed 64-bit range the drawing code indexes with.
ANCHOR_MIN = -(2**63)
ANCHOR_MAX = 2**63 - 1


def _anchor_axis(value: float, half: int) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return ANCHOR_MAX if value > 0 else ANCHOR_MIN
    return max(ANCHOR_MIN, min(ANCHOR_MAX, math.floor(value) - half))


def anchor_for(x: float, y: float, size: SplatterSize) -> tuple[int, int]:
    """Top-left pixel at which a bitmap of ``size`` is centred on (x, y).

    Coordinates are floored before the half-extent is subtracted. NaN maps
    to 0 and infinities saturate at ANCHOR_MIN / ANCHOR_MAX, so any float
    yields an anchor.
    """
    half = size.half_extent
    return (_anchor_axis(x, half), _anchor_axis(y, half))


@dataclass(frozen=True, eq=False)
class Bitmap:
    """A decoded RGBA image.

    Pixels are held in a read-only ``(height, width, 4)`` uint8 array, so a
    bitmap can be shared between threads without copying.
    """

    pixels: np.ndarray

    @classmethod
    def from_image(cls, image: Image.Image) -> Bitmap:
        """Build a bitmap from a PIL image, converting it to RGBA."""
        pixels = np.array(image.convert(PIXEL_MODE), dtype=np.uint8)
        pixels.setflags(write=False)
        return cls(pixels=pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def mode(self) -> str:
        return PIXEL_MODE

    def tobytes(self) -> bytes:
        """Raw RGBA bytes, row major."""
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        """Return a detached PIL copy that the caller may draw on freely."""
        return Image.fromarray(self.pixels.copy())


@dataclass(frozen=True, eq=False)
class FrameSet:
    """The animation frames of one splatter at one size."""

    frames: tuple[Bitmap, ...]

    def __post_init__(self):
        if len(self.frames) != FRAME_COUNT:
            raise ValueError(
                f"FrameSet needs exactly {FRAME_COUNT} frames, got {len(self.frames)}"
            )

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Bitmap]:
        return iter(self.frames)

    @property
    def last(self) -> Bitmap:
        return self.frames[-1]

    def frame(self, index: int) -> Bitmap:
        """Return frame ``index``, holding the last frame once the index runs past the end.

        Negative indices are treated as the first frame.
        """
        if index < 0:
            return self.frames[0]
        if index >= len(self.frames):
            return self.last
        return self.frames[index]


@dataclass(frozen=True, eq=False)
class Splatter:
    """One splatter effect with its Regular and Large frame sets."""

    effect_id: int
    regular: FrameSet
    large: FrameSet

    def frames(self, size: SplatterSize) -> FrameSet:
        if size is SplatterSize.LARGE:
            return self.large
        return self.regular

    def frame(self, index: int, size: SplatterSize) -> Bitmap:
        return self.frames(size).frame(index)

    def at(self, x: float, y: float, size: SplatterSize) -> tuple[int, int]:
        return anchor_for(x, y, size)
