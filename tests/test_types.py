import dataclasses

import numpy as np
import pytest

from v1data.types import MinMax, Sample, dtype_for, kind_of


def test_sample_is_immutable():
    s = Sample(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.x = 5.0


def test_sample_normalises_numpy_scalars():
    s = Sample(np.float64(1.0), np.complex128(1 + 2j), np.float64(3.0))
    assert type(s.x) is float
    assert type(s.y1) is complex
    assert type(s.y2) is float


def test_sample_diff_magnitude():
    assert Sample(0.0, 3.0, 5.0).diff_magnitude() == 2.0
    assert Sample(0.0, 3 + 4j, 0j).diff_magnitude() == pytest.approx(5.0)


def test_sample_format():
    assert Sample(1.0, 2.0, 3.0).format(".1f") == "X: 1.0, Y1: 2.0, Y2: 3.0"


def test_kind_helpers():
    assert dtype_for("real") is np.float64
    assert dtype_for("complex") is np.complex128
    with pytest.raises(ValueError):
        dtype_for("quaternion")
    assert kind_of([1.0, 2.0]) == "real"
    assert kind_of([1.0, 2j]) == "complex"
    assert kind_of([]) == "real"


def test_minmax_unpacks():
    lo, hi = MinMax(1.0, 2.0)
    assert (lo, hi) == (1.0, 2.0)
