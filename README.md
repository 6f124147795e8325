# tradingindicators

Technical trading indicators computed over a series of price candles.

Each indicator has a `calculate(index)` method. It returns the indicator's
value for the candle at `index`. Indicators cache their results, so asking
for consecutive indices again is cheap.

## Installation

```
pip install tradingindicators
```

The package has no runtime dependencies beyond the standard library.

## Building a series

```python
from datetime import datetime, timezone

from tradingindicators.base import Candle, TimeSeries

series = TimeSeries()
series.add_candle(Candle(
    time=datetime(2020, 6, 24, tzinfo=timezone.utc),
    open=1.5, high=2.0, low=1.0, close=1.8, volume=100,
))
```

`Candle` is a dataclass with the fields `time`, `open`, `high`, `low`,
`close` and `volume`. Only `time` is required; the others default to zero.

`TimeSeries` behaves as follows:

- `add_candle` raises `ValueError` if the candle is `None`.
- `add_candle` also raises `ValueError` if the candle's time is not later
  than the time of the last candle.
- `candle(index)` returns a candle. It raises `IndexError` when the index is
  out of range.
- `len()` and iteration work as on a list of candles.

## Indicators

All indicators subclass `tradingindicators.base.Indicator`.

| Class | Module | What it computes |
|-------|--------|------------------|
| `AverageTrueRange(series, period)` | `tradingindicators.average_true_range` | Wilder's Average True Range. Returns 0 for indices below `period - 1`. |
| `AverageVolume(series, period, candle_filter=None)` | `tradingindicators.average_volume` | Simple moving average of volume over the last `period` candles that pass the optional filter. Returns 0 when there are not enough such candles. |
| `ExponentialMovingAverage(series, smooth_interval)` | `tradingindicators.exponential_moving_average` | EMA of close prices with smoothing factor `2 / (smooth_interval + 1)`, seeded with the first close. |
| `VolumeWeightedAveragePrice(series)` | `tradingindicators.volume_weighted_average_price` | VWAP of the typical price `(high + low + close) / 3`, accumulated from the first candle of the same day. Aware times are compared by their UTC date; naive times are compared by their own date. |
| `Trend(fast_ema, slow_ema, flat_max_diff, flat_max_diff_in_percent=False)` | `tradingindicators.trend` | Direction from a fast and a slow indicator: `UP_TREND` (1.0), `DOWN_TREND` (-1.0) or `FLAT_TREND` (0.0). |

### Errors

- `AverageTrueRange` and `AverageVolume` raise `ValueError` when `period` is
  less than 1.
- `ExponentialMovingAverage` raises `ValueError` when the series is empty.
  It also raises `ValueError` when `smooth_interval` is negative.
- `ExponentialMovingAverage.calculate` raises `IndexError` for a negative
  index.
- `ExponentialMovingAverage` picks up candles added to the series after it
  was created. Its `smooth` property gives the smoothing factor.

### Trend

`Trend` reports a flat trend when the two values differ by no more than
`flat_max_diff`. With `flat_max_diff_in_percent=True`, `flat_max_diff` is
read as a percentage of the slow value.

```python
from tradingindicators.exponential_moving_average import ExponentialMovingAverage
from tradingindicators.trend import Trend

fast = ExponentialMovingAverage(series, 9)
slow = ExponentialMovingAverage(series, 21)
trend = Trend(fast, slow, 0.5, flat_max_diff_in_percent=True)
print(trend.calculate(len(series) - 1))
```

### Writing your own indicator

You can write your own indicator: subclass
`tradingindicators.base.Indicator` and implement `calculate(index)`. Any
such indicator can be passed to `Trend`.

## What this package does not do

This is a library only. It has these limits:

- It has no command-line tool.
- It does not fetch or load market data from files or services. You build
  a `TimeSeries` yourself.
- It does not store results anywhere beyond each indicator's in-memory
  cache.

## Running the tests

```
pip install -e ".[test]"
pytest
```