"""Persistence helpers for array-backed series."""

from .codec import LINE_NAMES, SeriesFormatError, load_array_series, save_array_series

__all__ = [
    "save_array_series",
    "load_array_series",
    "SeriesFormatError",
    "LINE_NAMES",
]
