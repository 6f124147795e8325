[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradingindicators"
version = "0.1.0"
description = "Technical trading indicators (ATR, EMA, VWAP, average volume, trend) over candle time series"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "indicators", "atr", "ema", "vwap", "technical-analysis", "candles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tradingindicators"]

[tool.pytest.ini_options]
addopts = "-ra"
