# -*- coding: utf-8 -*-
"""
Uniform random source for simulated vital signs.

Each sampler owns its own generator; share one across threads only behind
external synchronization.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..errors import PreconditionViolation


class UniformSampler:
    """Independent uniform draws over a caller-given closed interval."""

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        generator: Optional[np.random.Generator] = None,
    ) -> None:
        # default_rng(None) pulls fresh entropy from the OS once, here.
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    @staticmethod
    def _check_bounds(low: float, high: float) -> None:
        if low > high:
            raise PreconditionViolation(
                f"sample bounds out of order: min={low!r} > max={high!r}"
            )

    def sample(self, low: float, high: float) -> float:
        """Draw one value in ``[low, high]``."""
        self._check_bounds(low, high)
        if low == high:
            return float(low)
        return float(self._rng.uniform(low, high))

    def sample_many(self, low: float, high: float, count: int) -> List[float]:
        """Draw ``count`` independent values in ``[low, high]``."""
        self._check_bounds(low, high)
        if count < 0:
            raise PreconditionViolation(f"count must be >= 0, got {count!r}")
        if low == high:
            return [float(low)] * count
        return [float(v) for v in self._rng.uniform(low, high, size=count)]
