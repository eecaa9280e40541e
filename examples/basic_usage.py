#!/usr/bin/env python3
"""
Basic Usage Example - TA-Lib indicators through tai_app

This script demonstrates the basic usage of the indicator functions with
simulated closing prices. It shows how to:
- Check whether the TA-Lib C library is installed
- Compute single-output indicators (SMA, RSI, ATR)
- Unpack multi-output indicators (Bollinger Bands, MACD)
- Handle invalid parameters

Run: python examples/basic_usage.py
"""

import numpy as np

import tai_app
from tai_app.config import ConfigLoader
from tai_app.errors import InvalidParameterError, TAINotInstalledError
from tai_app.logging import configure_logging


def create_sample_ohlc(size: int = 120, seed: int = 42) -> dict:
    """Create a random-walk OHLC series."""
    rng = np.random.default_rng(seed)
    close = 100.0 + np.cumsum(rng.normal(0.0, 1.0, size))
    open_ = np.concatenate([[close[0]], close[:-1]])
    spread = np.abs(rng.normal(0.0, 0.5, size))
    return {
        "open": open_,
        "high": np.maximum(open_, close) + spread,
        "low": np.minimum(open_, close) - spread,
        "close": close,
    }


def last(values: np.ndarray) -> str:
    return f"{values[-1]:.2f}"


def main():
    """Run the basic usage example."""
    configure_logging(**ConfigLoader.create().load()["logging"])
    print("TAI App - Basic Usage Example")
    print("=" * 50)

    if not tai_app.available():
        print("TA-Lib C library is not installed; indicator calls will raise.")
        try:
            tai_app.sma([1.0, 2.0, 3.0], period=2)
        except TAINotInstalledError as e:
            print(f"  {type(e).__name__}: {e}")
        return

    data = create_sample_ohlc()
    close = data["close"]

    print("\nSingle-output indicators:")
    print(f"  SMA(20):  {last(tai_app.sma(close, period=20))}")
    print(f"  EMA(20):  {last(tai_app.ema(close, period=20))}")
    print(f"  RSI(14):  {last(tai_app.rsi(close, period=14))}")
    print(f"  ATR(14):  {last(tai_app.atr(data['high'], data['low'], close, period=14))}")

    print("\nMulti-output indicators:")
    upper, middle, lower = tai_app.bbands(close, period=20, nbdev_up=2.0, nbdev_down=2.0)
    print(f"  BBANDS(20): upper={last(upper)} middle={last(middle)} lower={last(lower)}")

    macd, signal, histogram = tai_app.macd(close)
    print(f"  MACD:       macd={last(macd)} signal={last(signal)} hist={last(histogram)}")

    slow_k, slow_d = tai_app.stoch(data["high"], data["low"], close)
    print(f"  STOCH:      %K={last(slow_k)} %D={last(slow_d)}")

    print("\nCandlestick patterns:")
    engulfing = tai_app.cdl_engulfing(data["open"], data["high"], data["low"], close)
    hits = np.flatnonzero(engulfing)
    print(f"  Engulfing found on {len(hits)} bars")

    print("\nInvalid parameters are rejected before reaching TA-Lib:")
    for call in (
        lambda: tai_app.sma(close[:10], period=20),
        lambda: tai_app.rsi([], period=14),
        lambda: tai_app.bbands(close, period=0),
    ):
        try:
            call()
        except InvalidParameterError as e:
            print(f"  {e}")

    print("\nBasic usage example completed!")


if __name__ == "__main__":
    main()
