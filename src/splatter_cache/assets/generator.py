"""Generate splatter animation frames as encoded PNG assets."""

from __future__ import annotations

import base64
import io
import math

import numpy as np
from PIL import Image, ImageDraw

from splatter_cache.types import FRAME_COUNT, PIXEL_MODE, SplatterSize

from .definitions import get_splatter_definition


def encode_png(image: Image.Image) -> str:
    """Encode an image as unpadded base-64 PNG text.

    Args:
        image: The image to encode.

    Returns:
        Base-64 text with the trailing ``=`` padding stripped.
    """
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii").rstrip("=")


class SplatterArtGenerator:
    """Draws splatter frames.

    Output is deterministic: the same (effect, size, frame) always produces
    the same pixels. Droplet placement is seeded per effect and size so the
    four frames of an animation show one splash growing and fading.
    """

    def __init__(self, seed: int = 0):
        """Initialize the generator.

        Args:
            seed: Base seed mixed into every frame's random layout.
        """
        self.seed = seed

    def render_frame(
        self,
        effect_id: int,
        size: SplatterSize,
        frame_index: int,
    ) -> Image.Image:
        """Draw one frame.

        Args:
            effect_id: Effect identifier from the definitions table.
            size: Size variant; the canvas is ``size.extent`` pixels square.
            frame_index: Animation frame, 0 to FRAME_COUNT - 1.

        Returns:
            An RGBA image.
        """
        definition = get_splatter_definition(effect_id)
        if definition is None:
            raise ValueError(f"No splatter definition for effect id {effect_id}")
        if not 0 <= frame_index < FRAME_COUNT:
            raise ValueError(f"Frame index must be in 0..{FRAME_COUNT - 1}, got {frame_index}")

        extent = size.extent
        half = size.half_extent
        img = Image.new(PIXEL_MODE, (extent, extent), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)

        rng = np.random.default_rng((self.seed, effect_id, size.value))
        count = definition["droplets"]
        angles = rng.uniform(0.0, 2.0 * math.pi, count)
        distances = rng.uniform(0.3, 1.0, count) * definition["spread"] * half
        radii = rng.uniform(0.04, 0.11, count) * half

        growth = (frame_index + 1) / FRAME_COUNT
        alpha = int(255 * (1.0 - 0.2 * frame_index))
        fill = (*definition["color"], alpha)

        core = half * 0.3 * (0.6 + 0.4 * growth)
        self._draw_disc(draw, half, half, core, fill)

        for angle, distance, radius in zip(angles, distances, radii):
            cx = half + math.cos(angle) * distance * growth
            cy = half + math.sin(angle) * distance * growth
            draw.line(
                [(half, half), (cx, cy)],
                fill=fill,
                width=max(1, int(radius * 0.5)),
            )
            self._draw_disc(draw, cx, cy, radius, fill)

        return img

    def encode_frame(self, effect_id: int, size: SplatterSize, frame_index: int) -> str:
        """Draw one frame and return it as unpadded base-64 PNG text."""
        return encode_png(self.render_frame(effect_id, size, frame_index))

    def _draw_disc(
        self,
        draw: "ImageDraw.ImageDraw",
        cx: float,
        cy: float,
        radius: float,
        fill: tuple[int, int, int, int],
    ) -> None:
        draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=fill)
