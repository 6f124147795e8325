"""Core types shared by all indicators: candles, time series and the indicator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator


class Indicator(ABC):
    """An indicator computes a value for the trading candle at a given index."""

    @abstractmethod
    def calculate(self, index: int) -> float:
        """Return the indicator value for the candle at ``index``."""


@dataclass
class Candle:
    """A single trading candle."""

    time: datetime
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0


class TimeSeries:
    """An ordered sequence of candles with strictly increasing times."""

    def __init__(self) -> None:
        self._candles: list[Candle] = []

    def add_candle(self, candle: Candle) -> None:
        """Append a candle; its time must be later than that of the last candle."""
        if candle is None:
            raise ValueError("candle must not be None")
        if self._candles and candle.time <= self._candles[-1].time:
            raise ValueError("candle time must be after the time of the last candle")
        self._candles.append(candle)

    def candle(self, index: int) -> Candle:
        """Return the candle at ``index``."""
        if not 0 <= index < len(self._candles):
            raise IndexError(f"candle index {index} out of range")
        return self._candles[index]

    def __len__(self) -> int:
        return len(self._candles)

    def __iter__(self) -> Iterator[Candle]:
        return iter(self._candles)