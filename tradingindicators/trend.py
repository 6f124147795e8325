"""Trend direction derived from a fast and a slow moving average."""

from __future__ import annotations

from .base import Indicator

FLAT_TREND = 0.0
UP_TREND = 1.0
DOWN_TREND = -1.0

_TOLERANCE = 1e-6


class Trend(Indicator):
    """Compare a fast and a slow EMA to tell up, down or flat trend.

    When the two averages differ by no more than ``flat_max_diff`` the trend
    is flat. With ``flat_max_diff_in_percent`` the threshold is taken as a
    percentage of the slow average.
    """

    def __init__(
        self,
        fast_ema: Indicator,
        slow_ema: Indicator,
        flat_max_diff: float,
        flat_max_diff_in_percent: bool = False,
    ) -> None:
        self._fast_ema = fast_ema
        self._slow_ema = slow_ema
        self._flat_max_diff = flat_max_diff
        self._flat_max_diff_in_percent = flat_max_diff_in_percent

    def calculate(self, index: int) -> float:
        """Return ``UP_TREND``, ``DOWN_TREND`` or ``FLAT_TREND`` for ``index``."""
        fast = self._fast_ema.calculate(index)
        slow = self._slow_ema.calculate(index)

        flat_max_diff = self._flat_max_diff
        if self._flat_max_diff_in_percent:
            flat_max_diff = slow * self._flat_max_diff / 100

        if abs(fast - slow) - flat_max_diff <= _TOLERANCE:
            return FLAT_TREND
        return UP_TREND if fast > slow else DOWN_TREND