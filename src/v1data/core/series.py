"""List- and array-backed measurement series.

Two concrete representations share one capability surface
(:class:`SeriesLike`):

``ListSeries``
    An ordered, appendable list of :class:`~v1data.types.Sample` objects.
    Duplicates by ``x`` are allowed and preserved.

``ArraySeries``
    Two parallel numpy arrays.  ``x_nodes`` holds the coordinates and
    ``values`` interleaves the dependent values so that ``values[2 * i]`` is
    ``y1`` and ``values[2 * i + 1]`` is ``y2`` for node ``i``.

Both are identified by ``(key, date)`` and are never mutated by the
operations defined here once their value storage exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Protocol, Tuple, Union, runtime_checkable

import numpy as np

from ..types import MinMax, Number, Sample, dtype_for

SampleFunction = Callable[[float], Sample]
ValuesFunction = Callable[[float], Tuple[Number, Number]]

_EMPTY = MinMax(0.0, 0.0)


@runtime_checkable
class SeriesLike(Protocol):
    """Capabilities shared by every series representation."""

    key: str
    date: datetime

    @property
    def length(self) -> int: ...

    @property
    def min_max_difference(self) -> MinMax: ...

    def __iter__(self) -> Iterator[Sample]: ...

    def render_long(self, fmt: str = "") -> str: ...


def _render(header: str, samples: Iterable[Sample], fmt: str) -> str:
    return "\n".join([header, *(s.format(fmt) for s in samples)])


@dataclass
class ListSeries:
    """Series backed by a growable list of samples."""

    key: str
    date: datetime
    samples: List[Sample] = field(default_factory=list)

    @classmethod
    def from_function(
        cls, key: str, date: datetime, xs: Iterable[float], fdi: SampleFunction
    ) -> "ListSeries":
        """Build a series with one ``fdi(x)`` call per coordinate, in order."""

        return cls(key, date, [fdi(float(x)) for x in xs])

    def append(self, sample: Sample) -> None:
        self.samples.append(sample)

    @property
    def length(self) -> int:
        return len(self.samples)

    @property
    def min_max_difference(self) -> MinMax:
        """Return the min and max of ``|y1 - y2|``; ``(0, 0)`` when empty."""

        if not self.samples:
            return _EMPTY
        diffs = [s.diff_magnitude() for s in self.samples]
        return MinMax(min(diffs), max(diffs))

    def __iter__(self) -> Iterator[Sample]:
        return iter(list(self.samples))

    def __len__(self) -> int:
        return self.length

    def render_long(self, fmt: str = "") -> str:
        return _render(str(self), self.samples, fmt)

    def __str__(self) -> str:
        return f"ListSeries: Key = {self.key}, Date = {self.date}, Count = {self.length}"


@dataclass(eq=False)
class ArraySeries:
    """Series backed by a node array and an interleaved value array.

    Parameters
    ----------
    key, date:
        Identity of the series inside a collection.
    x_nodes:
        Coordinates, converted to a one-dimensional ``float64`` array.
    values:
        Interleaved ``y1``/``y2`` values.  Complex input yields a
        ``complex128`` array, anything else ``float64``.

    Raises
    ------
    ValueError
        If ``len(values) != 2 * len(x_nodes)``.
    """

    key: str
    date: datetime
    x_nodes: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=float))
    values: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=float))

    def __post_init__(self) -> None:
        self.x_nodes = np.array(self.x_nodes, dtype=float).reshape(-1)
        values = np.array(self.values).reshape(-1)
        if not np.iscomplexobj(values):
            values = values.astype(float)
        self.values = values
        if self.values.shape[0] != 2 * self.x_nodes.shape[0]:
            raise ValueError(
                f"values must hold 2 * {self.x_nodes.shape[0]} entries, got {self.values.shape[0]}"
            )

    @classmethod
    def empty(cls, key: str, date: datetime, kind: str = "real") -> "ArraySeries":
        dtype = dtype_for(kind)
        return cls(key, date, np.zeros(0, dtype=float), np.zeros(0, dtype=dtype))

    @classmethod
    def from_function(
        cls,
        key: str,
        date: datetime,
        xs: Iterable[float],
        fvalues: ValuesFunction,
        kind: str = "real",
    ) -> "ArraySeries":
        """Build a series by calling ``fvalues(x) -> (y1, y2)`` per coordinate."""

        x_nodes = np.array(list(xs), dtype=float)
        values = np.zeros(2 * x_nodes.shape[0], dtype=dtype_for(kind))
        for i, x in enumerate(x_nodes):
            values[2 * i], values[2 * i + 1] = fvalues(float(x))
        return cls(key, date, x_nodes, values)

    @property
    def kind(self) -> str:
        return "complex" if np.iscomplexobj(self.values) else "real"

    @property
    def y1(self) -> np.ndarray:
        return self.values[0::2]

    @property
    def y2(self) -> np.ndarray:
        return self.values[1::2]

    @property
    def length(self) -> int:
        return int(self.x_nodes.shape[0])

    @property
    def min_max_difference(self) -> MinMax:
        """Return the min and max of ``|y1 - y2|``.

        ``(0, 0)`` is returned when fewer than two value slots exist.
        """

        if self.values.shape[0] < 2:
            return _EMPTY
        diffs = np.abs(self.y1 - self.y2)
        return MinMax(float(diffs.min()), float(diffs.max()))

    def __getitem__(self, index: int) -> Optional[Sample]:
        if index < 0 or index >= self.length:
            return None
        return Sample(self.x_nodes[index], self.values[2 * index], self.values[2 * index + 1])

    def __iter__(self) -> Iterator[Sample]:
        for i in range(self.length):
            yield Sample(self.x_nodes[i], self.values[2 * i], self.values[2 * i + 1])

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArraySeries):
            return NotImplemented
        return (
            self.key == other.key
            and self.date == other.date
            and np.array_equal(self.x_nodes, other.x_nodes)
            and np.array_equal(self.values, other.values)
        )

    def render_long(self, fmt: str = "") -> str:
        return _render(str(self), self, fmt)

    def __str__(self) -> str:
        return f"ArraySeries: Key = {self.key}, Date = {self.date}, Count = {self.length}"


Series = Union[ListSeries, ArraySeries]

__all__ = [
    "ArraySeries",
    "ListSeries",
    "Series",
    "SeriesLike",
    "SampleFunction",
    "ValuesFunction",
]
