"""Common type helpers for v1data.

This module defines the immutable :class:`Sample` triple shared by both
series representations together with the numeric kind helpers used to pick
between real and complex dependent values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple, Union

import numpy as np

Number = Union[float, complex]
NumericKind = Literal["real", "complex"]

KIND_DTYPES = {
    "real": np.float64,
    "complex": np.complex128,
}


def dtype_for(kind: str) -> type:
    """Return the numpy scalar type backing values of ``kind``."""

    try:
        return KIND_DTYPES[kind]
    except KeyError:
        raise ValueError(f"unknown numeric kind: {kind!r}") from None


def kind_of(values) -> NumericKind:
    """Infer the numeric kind of an iterable of values."""

    return "complex" if any(isinstance(v, (complex, np.complexfloating)) for v in values) else "real"


def _scalar(value: Number) -> Number:
    # numpy scalars print and compare differently from builtins
    if isinstance(value, (complex, np.complexfloating)):
        return complex(value)
    return float(value)


@dataclass(frozen=True)
class Sample:
    """Single ``(x, y1, y2)`` measurement."""

    x: float
    y1: Number
    y2: Number

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y1", _scalar(self.y1))
        object.__setattr__(self, "y2", _scalar(self.y2))

    def diff_magnitude(self) -> float:
        """Return ``|y1 - y2|``."""

        return float(abs(self.y1 - self.y2))

    def format(self, spec: str = "") -> str:
        return f"X: {self.x:{spec}}, Y1: {self.y1:{spec}}, Y2: {self.y2:{spec}}"

    def __str__(self) -> str:
        return f"X: {self.x}, Y1: {self.y1}, Y2: {self.y2}"


class MinMax(NamedTuple):
    """Smallest and largest ``|y1 - y2|`` of a series."""

    min: float
    max: float


__all__ = ["Number", "NumericKind", "Sample", "MinMax", "dtype_for", "kind_of", "KIND_DTYPES"]
