"""Decode base-64 PNG text into bitmaps."""

from __future__ import annotations

import base64
import binascii
import io
import struct

from PIL import Image, UnidentifiedImageError

from splatter_cache.errors import SplatterAssetError
from splatter_cache.types import Bitmap


def decode(encoded: str) -> Bitmap:
    """Decode unpadded base-64 PNG text into an RGBA bitmap.

    Args:
        encoded: Base-64 text without ``=`` padding.

    Returns:
        The decoded Bitmap.

    Raises:
        SplatterAssetError: The text or the PNG payload is malformed.
    """
    if "=" in encoded:
        raise SplatterAssetError("Bad splatter image: encoded text carries padding")

    try:
        data = base64.b64decode(encoded + "=" * (-len(encoded) % 4), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SplatterAssetError(f"Bad splatter image: {exc}") from exc

    try:
        with Image.open(io.BytesIO(data), formats=["PNG"]) as img:
            img.load()
            return Bitmap.from_image(img)
    except (
        Image.DecompressionBombError,
        UnidentifiedImageError,
        OSError,
        SyntaxError,
        ValueError,
        struct.error,
    ) as exc:
        raise SplatterAssetError(f"Bad splatter payload: {exc}") from exc
