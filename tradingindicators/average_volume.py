"""Simple moving average of candle volume, with an optional candle filter."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from .base import Candle, Indicator, TimeSeries

CandleFilter = Callable[[Candle], bool]


class AverageVolume(Indicator):
    """Average volume of the last ``period`` candles that pass ``candle_filter``."""

    def __init__(
        self,
        series: TimeSeries,
        period: int,
        candle_filter: Optional[CandleFilter] = None,
    ) -> None:
        if period < 1:
            raise ValueError("period must be positive")
        self._series = series
        self._period = period
        self._filter = candle_filter
        self._cache: dict[int, float] = {}
        self._lock = threading.Lock()

    def calculate(self, index: int) -> float:
        """Return the average volume ending at ``index``, or 0 if there is not enough data."""
        if index < self._period - 1:
            return 0.0

        with self._lock:
            cached = self._cache.get(index)
        if cached is not None:
            return cached

        volumes = []
        for i in range(index, -1, -1):
            candle = self._series.candle(i)
            if self._filter is not None and not self._filter(candle):
                continue
            volumes.append(candle.volume)
            if len(volumes) == self._period:
                break
        else:
            return 0.0

        average = sum(volumes) / self._period
        with self._lock:
            self._cache[index] = average
        return average