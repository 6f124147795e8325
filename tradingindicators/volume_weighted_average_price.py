"""Volume-weighted average price (VWAP), reset at the start of each day."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from .base import Candle, Indicator, TimeSeries


@dataclass(frozen=True)
class _VwapUnit:
    vwap: float = 0.0
    price_volume_total: float = 0.0
    volume_total: int = 0


def _day_of(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def _typical_price(candle: Candle) -> float:
    return (candle.high + candle.low + candle.close) / 3


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class VolumeWeightedAveragePrice(Indicator):
    """VWAP accumulated over the candles of the same (UTC) day."""

    def __init__(self, series: TimeSeries) -> None:
        self._series = series
        self._cache: dict[int, _VwapUnit] = {}
        self._lock = threading.Lock()

    def _get(self, index: int) -> Optional[_VwapUnit]:
        with self._lock:
            return self._cache.get(index)

    def _put(self, index: int, unit: _VwapUnit) -> None:
        with self._lock:
            self._cache[index] = unit

    def calculate(self, index: int) -> float:
        """Return VWAP for the candle at ``index`` since the start of its day."""
        cached = self._get(index)
        if cached is not None:
            return cached.vwap

        day = _day_of(self._series.candle(index).time)
        start, unit = self._find_last_calculated(index, day)
        price_volume_total = unit.price_volume_total
        volume_total = unit.volume_total

        for i in range(start, index + 1):
            candle = self._series.candle(i)
            if _day_of(candle.time) != day:
                break
            price_volume_total += candle.volume * _typical_price(candle)
            volume_total += candle.volume
            self._put(
                i,
                _VwapUnit(
                    vwap=_divide(price_volume_total, volume_total),
                    price_volume_total=price_volume_total,
                    volume_total=volume_total,
                ),
            )

        result = self._get(index)
        return result.vwap if result is not None else 0.0

    def _find_last_calculated(self, index: int, day: date) -> tuple[int, _VwapUnit]:
        for i in range(index - 1, -1, -1):
            if _day_of(self._series.candle(i).time) != day:
                return i + 1, _VwapUnit()
            unit = self._get(i)
            if unit is not None:
                return i + 1, unit
        return 0, _VwapUnit()