# src/v1data/io/codec.py
"""Line-oriented persistence for array-backed series.

A file holds exactly five newline-terminated lines, each an independent JSON
document:

1. key            ``"name"``
2. date           ``"2024-05-01T12:00:00.250000"`` (ISO-8601)
3. x nodes        ``[1.0, 2.0, 3.0]``
4. y1 values      ``[1.0, 2.0, 3.0]``
5. y2 values      ``[2.0, 4.0, 6.0]``

Complex values are written as ``[re, im]`` pairs.  There is no header or
version marker; only :func:`save_array_series` and :func:`load_array_series`
understand the layout.
"""

from __future__ import annotations

import json
import logging
import pathlib
from datetime import datetime
from typing import Any, List, TextIO, Union

import numpy as np

from ..core.series import ArraySeries

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]

LINE_NAMES = ("key", "date", "x nodes", "y1 values", "y2 values")


class SeriesFormatError(ValueError):
    """Raised when a saved series file violates the five-line layout."""

    def __init__(self, message: str, *, path: PathLike, line: int):
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{self.line}: {message}")


def _encode_values(values: np.ndarray) -> List[Any]:
    if np.iscomplexobj(values):
        return [[float(v.real), float(v.imag)] for v in values]
    return [float(v) for v in values]


def save_array_series(path: PathLike, series: ArraySeries, *, encoding: str = "utf8") -> None:
    """Write ``series`` to ``path`` in the five-line JSON layout.

    ``OSError`` propagates; a partially written file may remain.
    """

    if not isinstance(series, ArraySeries):
        raise TypeError(f"only ArraySeries can be saved, got {type(series).__name__}")

    lines = [
        json.dumps(series.key),
        json.dumps(series.date.isoformat()),
        json.dumps([float(x) for x in series.x_nodes]),
        json.dumps(_encode_values(series.y1)),
        json.dumps(_encode_values(series.y2)),
    ]
    with open(path, "w", encoding=encoding) as fh:
        for line in lines:
            fh.write(line + "\n")
    logger.debug("saved series %r (%d nodes) to %s", series.key, series.length, path)


def _decode_number(item: Any) -> Union[float, complex]:
    if isinstance(item, bool):
        raise ValueError(f"expected a number, got {item!r}")
    if isinstance(item, (int, float)):
        return float(item)
    if (
        isinstance(item, list)
        and len(item) == 2
        and all(isinstance(p, (int, float)) and not isinstance(p, bool) for p in item)
    ):
        return complex(item[0], item[1])
    raise ValueError(f"expected a number or [re, im] pair, got {item!r}")


def _decode_real(item: Any) -> float:
    value = _decode_number(item)
    if isinstance(value, complex):
        raise ValueError(f"expected a real number, got {item!r}")
    return value


def _decode_line(raw: str, lineno: int, path: PathLike) -> Any:
    name = LINE_NAMES[lineno - 1]
    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SeriesFormatError(f"invalid JSON for {name}: {exc.msg}", path=path, line=lineno) from exc

    try:
        if lineno == 1:
            if not isinstance(obj, str):
                raise ValueError(f"expected a string, got {obj!r}")
            return obj
        if lineno == 2:
            if not isinstance(obj, str):
                raise ValueError(f"expected a string, got {obj!r}")
            return datetime.fromisoformat(obj[:-1] + "+00:00" if obj.endswith("Z") else obj)
        if not isinstance(obj, list):
            raise ValueError(f"expected an array, got {obj!r}")
        if lineno == 3:
            return [_decode_real(v) for v in obj]
        return [_decode_number(v) for v in obj]
    except (ValueError, OverflowError) as exc:
        raise SeriesFormatError(f"invalid {name}: {exc}", path=path, line=lineno) from exc


def _read_lines(fh: TextIO, path: PathLike) -> List[Any]:
    decoded: List[Any] = []
    for lineno in range(1, len(LINE_NAMES) + 1):
        try:
            raw = fh.readline()
        except UnicodeDecodeError as exc:
            raise SeriesFormatError(
                f"invalid {LINE_NAMES[lineno - 1]} encoding: {exc.reason}", path=path, line=lineno
            ) from exc
        if not raw:
            raise SeriesFormatError(
                f"missing {LINE_NAMES[lineno - 1]} line", path=path, line=lineno
            )
        decoded.append(_decode_line(raw, lineno, path))
    return decoded


def load_array_series(path: PathLike, *, encoding: str = "utf8") -> ArraySeries:
    """Read an :class:`ArraySeries` written by :func:`save_array_series`.

    Raises
    ------
    SeriesFormatError
        If a line is missing, cannot be decoded with ``encoding``, is not
        valid JSON, has the wrong type, or the y1/y2 arrays do not match the
        number of x nodes.
    OSError
        If the file cannot be read.
    """

    with open(path, "r", encoding=encoding) as fh:
        key, date, x_nodes, y1, y2 = _read_lines(fh, path)

    for lineno, ys in ((4, y1), (5, y2)):
        if len(ys) != len(x_nodes):
            raise SeriesFormatError(
                f"{LINE_NAMES[lineno - 1]} has {len(ys)} entries for {len(x_nodes)} x nodes",
                path=path,
                line=lineno,
            )

    is_complex = any(isinstance(v, complex) for v in (*y1, *y2))
    values = np.zeros(2 * len(x_nodes), dtype=np.complex128 if is_complex else np.float64)
    values[0::2] = y1
    values[1::2] = y2
    logger.debug("loaded series %r (%d nodes) from %s", key, len(x_nodes), path)
    return ArraySeries(key, date, np.asarray(x_nodes, dtype=float), values)


__all__ = ["save_array_series", "load_array_series", "SeriesFormatError", "LINE_NAMES"]
