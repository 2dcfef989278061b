"""Demo data generation.

Coordinates are drawn from an explicitly passed :class:`numpy.random.Generator`
so that every generated collection is reproducible from a seed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import numpy as np

from .core.collection import MainCollection
from .core.series import ArraySeries, ListSeries, SampleFunction, ValuesFunction
from .types import Sample, dtype_for


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_nodes(count: int, rng: np.random.Generator, step: float = 0.1) -> np.ndarray:
    """Return ``count`` coordinates ``i * step + u`` with ``u ~ U[0, 1)``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    return np.arange(count, dtype=float) * step + rng.random(count)


def linear_values(kind: str = "real") -> ValuesFunction:
    """Sample function for array-backed series: ``y1 = x``, ``y2 = 3x``."""

    cast = dtype_for(kind)

    def fvalues(x: float):
        return cast(x), cast(3 * x)

    return fvalues


def linear_sample(kind: str = "real") -> SampleFunction:
    """Sample function for list-backed series.

    Real: ``(x, 2x, 4x)``.  Complex: ``(x, x + 2xj, 3x + 4xj)``.
    """

    if kind == "complex":
        return lambda x: Sample(x, complex(x, 2 * x), complex(3 * x, 4 * x))
    if kind != "real":
        raise ValueError(f"unknown numeric kind: {kind!r}")
    return lambda x: Sample(x, 2 * x, 4 * x)


def demo_collection(
    n_array: int,
    n_list: int,
    *,
    n_nodes: int = 5,
    kind: str = "real",
    step: float = 0.1,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    date: Optional[datetime] = None,
) -> MainCollection:
    """Build a collection of ``Array_i`` members followed by ``List_i`` members."""

    if rng is None:
        rng = make_rng(seed)
    if date is None:
        date = datetime.now()

    collection = MainCollection()
    fvalues = linear_values(kind)
    fdi = linear_sample(kind)
    for i in range(n_array):
        xs = random_nodes(n_nodes, rng, step)
        collection.add(ArraySeries.from_function(f"Array_{i}", date, xs, fvalues, kind=kind))
    for i in range(n_list):
        xs = random_nodes(n_nodes, rng, step)
        collection.add(ListSeries.from_function(f"List_{i}", date, xs, fdi))
    return collection


__all__ = ["make_rng", "random_nodes", "linear_values", "linear_sample", "demo_collection"]
