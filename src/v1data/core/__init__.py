"""Core data structures and queries for v1data."""

from .collection import MainCollection, SeriesNotFoundError
from .convert import to_array_series
from .series import ArraySeries, ListSeries, Series, SeriesLike

__all__ = [
    "ArraySeries",
    "ListSeries",
    "Series",
    "SeriesLike",
    "MainCollection",
    "SeriesNotFoundError",
    "to_array_series",
]
