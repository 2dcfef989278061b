"""Ordered collection of series with ``(key, date)`` uniqueness.

The collection owns its member list and exposes only the operations that
keep the uniqueness invariant intact: members can be appended through
:meth:`MainCollection.add` but never replaced or removed.  Aggregate
queries operate on the flattened sample enumeration, i.e. every member's
samples in collection order followed by per-series order.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Set

from ..types import Sample
from .series import Series

logger = logging.getLogger(__name__)


class SeriesNotFoundError(KeyError):
    """Raised when no member of a collection carries the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"no series with key {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class MainCollection:
    """Ordered set of series keyed by ``(key, date)``."""

    def __init__(self, members: Iterable[Series] = ()) -> None:
        self._members: List[Series] = []
        for series in members:
            self.add(series)

    def add(self, series: Series) -> bool:
        """Append ``series`` unless a member shares both its key and date.

        Returns
        -------
        bool
            ``True`` when appended, ``False`` when rejected.  A rejected
            insert leaves the collection unchanged.
        """

        if any(m.key == series.key and m.date == series.date for m in self._members):
            logger.debug("rejected duplicate series key=%r date=%s", series.key, series.date)
            return False
        self._members.append(series)
        return True

    def get(self, key: str) -> Series:
        """Return the first member whose key equals ``key``."""

        for series in self._members:
            if series.key == key:
                return series
        raise SeriesNotFoundError(key)

    def __getitem__(self, key: str) -> Series:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return any(m.key == key for m in self._members)

    def series(self) -> Iterator[Series]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def samples(self) -> Iterator[Sample]:
        """Yield every sample of every member, restarting on each call."""

        for series in list(self._members):
            yield from series

    def __iter__(self) -> Iterator[Sample]:
        return self.samples()

    def max_y1_magnitude(self) -> float:
        """Return the largest ``|y1|`` over all samples, or ``-1.0`` if none."""

        return max((float(abs(s.y1)) for s in self.samples()), default=-1.0)

    def repeating_x_coordinates(self) -> List[float]:
        """Return the coordinates present in two or more distinct members.

        A coordinate repeated inside a single series does not qualify on its
        own.  The result is sorted ascending and free of duplicates.
        """

        owners: Dict[float, Set[int]] = {}
        for index, series in enumerate(self._members):
            for sample in series:
                owners.setdefault(sample.x, set()).add(index)
        return sorted(x for x, members in owners.items() if len(members) > 1)

    def render_long(self, fmt: str = "") -> str:
        lines = [f"MainCollection (detailed): {len(self)} elements"]
        lines.extend(series.render_long(fmt) for series in self._members)
        return "\n".join(lines)

    def __str__(self) -> str:
        return "\n".join([f"MainCollection: {len(self)} elements", *map(str, self._members)])

    def __repr__(self) -> str:  # pragma: no cover
        return f"MainCollection(members={len(self._members)})"


__all__ = ["MainCollection", "SeriesNotFoundError"]
