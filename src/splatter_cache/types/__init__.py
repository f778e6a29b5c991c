"""Type definitions for the splatter cache."""

from .splatters import (
    ANCHOR_MAX,
    ANCHOR_MIN,
    FRAME_COUNT,
    PIXEL_MODE,
    Bitmap,
    FrameSet,
    Splatter,
    SplatterSize,
    anchor_for,
)

__all__ = [
    "ANCHOR_MAX",
    "ANCHOR_MIN",
    "FRAME_COUNT",
    "PIXEL_MODE",
    "Bitmap",
    "FrameSet",
    "Splatter",
    "SplatterSize",
    "anchor_for",
]
