"""Technical trading indicators (ATR, average volume, EMA, trend, VWAP) over candle time series."""

__version__ = "0.1.0"
__all__ = [
    "average_true_range",
    "average_volume",
    "base",
    "exponential_moving_average",
    "trend",
    "volume_weighted_average_price",
]