"""Labeled, dated measurement series in list and array form."""

from .core import (
    ArraySeries,
    ListSeries,
    MainCollection,
    Series,
    SeriesLike,
    SeriesNotFoundError,
    to_array_series,
)
from .io import SeriesFormatError, load_array_series, save_array_series
from .types import MinMax, Sample

__all__ = [
    "Sample",
    "MinMax",
    "ArraySeries",
    "ListSeries",
    "Series",
    "SeriesLike",
    "MainCollection",
    "SeriesNotFoundError",
    "to_array_series",
    "save_array_series",
    "load_array_series",
    "SeriesFormatError",
]
