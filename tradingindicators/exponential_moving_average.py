"""Exponential Moving Average (EMA) of candle close prices."""

from __future__ import annotations

import threading

from .base import Indicator, TimeSeries


class ExponentialMovingAverage(Indicator):
    """EMA of close prices with smoothing factor ``2 / (smooth_interval + 1)``."""

    def __init__(self, series: TimeSeries, smooth_interval: int) -> None:
        if len(series) == 0:
            raise ValueError("series is empty")
        if smooth_interval < 0:
            raise ValueError("smooth_interval cannot be negative")
        self._series = series
        self._smooth_interval = smooth_interval
        self._smooth = 2 / (smooth_interval + 1)
        self._values: list[float] = []
        self._lock = threading.Lock()

    @property
    def smooth(self) -> float:
        """The smoothing factor applied to each new close price."""
        return self._smooth

    def calculate(self, index: int) -> float:
        """Return the EMA for the candle at ``index``.

        The first candle's EMA is its close price. Candles appended to the
        series after construction are picked up as they are requested.
        """
        if index < 0:
            raise IndexError(f"candle index {index} out of range")
        with self._lock:
            if index < len(self._values):
                return self._values[index]
            if not self._values:
                self._values.append(self._series.candle(0).close)
            for i in range(len(self._values), index + 1):
                close = self._series.candle(i).close
                self._values.append(
                    self._smooth * close + (1 - self._smooth) * self._values[-1]
                )
            return self._values[index]