"""Conversion from the list representation to the array representation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..types import dtype_for, kind_of
from .series import ArraySeries, ListSeries

LOOKUP_MODES = ("positional", "first_match")


def to_array_series(
    source: ListSeries,
    *,
    lookup: str = "positional",
    kind: Optional[str] = None,
) -> ArraySeries:
    """Return a new :class:`ArraySeries` holding the samples of ``source``.

    Parameters
    ----------
    source:
        List-backed series to convert.  It is left untouched and shares no
        storage with the result.
    lookup:
        ``"positional"`` (default) copies ``y1``/``y2`` of sample ``i`` into
        node ``i``.  ``"first_match"`` resolves every node through the first
        sample with an equal ``x``, so samples sharing a coordinate all take
        the values of the earliest one.  Both agree when coordinates are
        unique.
    kind:
        Numeric kind of the resulting value array.  Inferred from the samples
        when omitted.
    """

    if lookup not in LOOKUP_MODES:
        raise ValueError(f"lookup must be one of {LOOKUP_MODES}, got {lookup!r}")

    samples = list(source.samples)
    if kind is None:
        kind = kind_of([v for s in samples for v in (s.y1, s.y2)])

    x_nodes = np.array([s.x for s in samples], dtype=float)
    values = np.zeros(2 * len(samples), dtype=dtype_for(kind))
    values[0::2] = [s.y1 for s in samples]
    values[1::2] = [s.y2 for s in samples]

    if lookup == "first_match" and len(samples):
        # np.unique returns the index of the first occurrence of each value
        _, first, inverse = np.unique(x_nodes, return_index=True, return_inverse=True)
        src = first[inverse.reshape(-1)]
        values[0::2] = values[0::2][src]
        values[1::2] = values[1::2][src]

    return ArraySeries(source.key, source.date, x_nodes, values)


__all__ = ["to_array_series", "LOOKUP_MODES"]
