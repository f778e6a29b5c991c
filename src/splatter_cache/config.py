"""Runtime configuration for the splatter cache."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class SplatterConfig:
    """Settings for the process-wide splatter lookup."""

    eager_warm: bool = False  # Decode everything when the default lookup is created
    warm_workers: int = 1  # Threads used by warm_all

    def __post_init__(self):
        if self.warm_workers < 1:
            raise ValueError(f"warm_workers must be at least 1, got {self.warm_workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> SplatterConfig:
        """Read settings from SPLATTER_CACHE_* environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            A SplatterConfig, with defaults for unset variables.
        """
        env = os.environ if environ is None else environ
        eager = env.get("SPLATTER_CACHE_EAGER_WARM", "").strip().lower() in _TRUE_VALUES
        workers = env.get("SPLATTER_CACHE_WARM_WORKERS", "").strip()
        try:
            warm_workers = int(workers) if workers else 1
        except ValueError as exc:
            raise ValueError(
                f"SPLATTER_CACHE_WARM_WORKERS must be an integer, got {workers!r}"
            ) from exc
        return cls(eager_warm=eager, warm_workers=warm_workers)
