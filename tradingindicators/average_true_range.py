"""Average True Range (ATR) indicator."""

from __future__ import annotations

from .base import Indicator, TimeSeries


class AverageTrueRange(Indicator):
    """Average True Range smoothed with Wilder's method over ``period`` candles."""

    def __init__(self, series: TimeSeries, period: int) -> None:
        if period < 1:
            raise ValueError("period must be positive")
        self._series = series
        self._period = period
        self._cache: dict[int, float] = {}
        self._last_computed = period - 1

    def calculate(self, index: int) -> float:
        """Return ATR for ``index``; 0 while fewer than ``period`` candles are available."""
        if index < self._period - 1:
            return 0.0
        cached = self._cache.get(index)
        if cached is not None:
            return cached

        for i in range(self._last_computed, index + 1):
            self._cache[i] = self._compute(i)
        self._last_computed = index
        return self._cache[index]

    def _compute(self, i: int) -> float:
        period = self._period
        if i == period - 1:
            # The first value is the plain mean of the first true ranges.
            return sum(self._true_range(j) for j in range(period)) / period
        return (self._cache[i - 1] * (period - 1) + self._true_range(i)) / period

    def _true_range(self, index: int) -> float:
        candle = self._series.candle(index)
        high_low = abs(candle.high - candle.low)
        if index == 0:
            return high_low
        prev_close = self._series.candle(index - 1).close
        return max(high_low, abs(candle.high - prev_close), abs(candle.low - prev_close))