from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..simulation.sampler import UniformSampler


@dataclass
class FeedConfig:
    fallback_min_bpm: float = 60.0
    fallback_max_bpm: float = 100.0


def _safe_float(value: object, default: Optional[float] = None) -> Optional[float]:
    try:
        val = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(val) or math.isinf(val):
        return default
    return val


class LiveHeartRateFeed:
    """Replay stored heart-rate values, then keep going with random ones."""

    def __init__(
        self,
        values: Iterable[object] = (),
        sampler: Optional[UniformSampler] = None,
        config: Optional[FeedConfig] = None,
    ) -> None:
        self.config = config or FeedConfig()
        self.sampler = sampler or UniformSampler()
        self._stored = list(values)
        self._index = 0
        self._x = 0
        self.replayed = 0

    def _next_bpm(self) -> float:
        while self._index < len(self._stored):
            value = _safe_float(self._stored[self._index])
            self._index += 1
            if value is not None:
                self.replayed += 1
                return value
        return self.sampler.sample(self.config.fallback_min_bpm, self.config.fallback_max_bpm)

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        while True:
            yield self.next_point()

    def next_point(self) -> Tuple[int, float]:
        point = (self._x, self._next_bpm())
        self._x += 1
        return point

    def take(self, count: int) -> List[Tuple[int, float]]:
        return [self.next_point() for _ in range(max(0, count))]
