"""Exceptions raised by the splatter cache."""

from __future__ import annotations


class SplatterAssetError(RuntimeError):
    """An encoded splatter asset could not be decoded or the table is malformed.

    The asset table ships with the program, so this is a packaging defect.
    It is never caught inside the library.
    """
