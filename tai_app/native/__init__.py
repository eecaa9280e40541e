"""
Boundary to the TA-Lib native engine.
"""

from .library import (
    NativeLibrary,
    TALibLibrary,
    available,
    check_available,
    get_library,
    set_library,
)
from .outputs import OutputAdapter

__all__ = [
    "NativeLibrary",
    "TALibLibrary",
    "available",
    "check_available",
    "get_library",
    "set_library",
    "OutputAdapter",
]
