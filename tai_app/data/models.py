"""Shared parameter types for indicator calls."""

from enum import IntEnum


class MAType(IntEnum):
    """Moving average kinds understood by TA-Lib's ``matype`` parameters."""
    SMA = 0
    EMA = 1
    WMA = 2
    DEMA = 3
    TEMA = 4
    TRIMA = 5
    KAMA = 6
    MAMA = 7
    T3 = 8
