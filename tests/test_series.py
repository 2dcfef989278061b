from datetime import datetime

import numpy as np
import pytest

from v1data.core import ArraySeries, ListSeries, SeriesLike
from v1data.types import MinMax, Sample

DATE = datetime(2024, 5, 1, 12, 0, 0)


def fvalues(x):
    return x, 3 * x


def test_list_series_from_function_keeps_order_and_duplicates():
    xs = [0.3, 0.1, 0.3]
    series = ListSeries.from_function("L", DATE, xs, lambda x: Sample(x, x, 2 * x))
    assert [s.x for s in series] == xs
    assert series.length == 3
    assert len(series) == 3


def test_array_series_from_function_interleaves_values():
    series = ArraySeries.from_function("A", DATE, [1.0, 2.0], fvalues)
    np.testing.assert_allclose(series.x_nodes, [1.0, 2.0])
    np.testing.assert_allclose(series.values, [1.0, 3.0, 2.0, 6.0])
    np.testing.assert_allclose(series.y1, [1.0, 2.0])
    np.testing.assert_allclose(series.y2, [3.0, 6.0])
    assert series.kind == "real"


def test_array_series_complex_kind():
    series = ArraySeries.from_function(
        "C", DATE, [1.0, 2.0], lambda x: (complex(x, 2 * x), complex(3 * x, 4 * x)), kind="complex"
    )
    assert series.kind == "complex"
    assert series[1] == Sample(2.0, 2 + 4j, 6 + 8j)


def test_array_series_rejects_mismatched_values():
    with pytest.raises(ValueError):
        ArraySeries("A", DATE, [1.0, 2.0], [1.0, 2.0, 3.0])


def test_array_series_does_not_alias_inputs():
    xs = np.array([1.0, 2.0])
    vals = np.array([1.0, 2.0, 3.0, 4.0])
    series = ArraySeries("A", DATE, xs, vals)
    xs[0] = 99.0
    vals[0] = 99.0
    assert series.x_nodes[0] == 1.0
    assert series.values[0] == 1.0


@pytest.mark.parametrize("index", [4, 10, -1])
def test_array_indexer_out_of_range_is_absent(index):
    series = ArraySeries.from_function("A", DATE, [1.0, 2.0, 3.0, 4.0], fvalues)
    assert series[index] is None


def test_array_indexer_in_range():
    series = ArraySeries.from_function("A", DATE, [1.0, 2.0, 3.0, 4.0], fvalues)
    assert series[2] == Sample(3.0, 3.0, 9.0)


def test_min_max_empty_series():
    assert ListSeries("L", DATE).min_max_difference == MinMax(0.0, 0.0)
    assert ArraySeries.empty("A", DATE).min_max_difference == MinMax(0.0, 0.0)
    assert ArraySeries.empty("C", DATE, kind="complex").min_max_difference == (0, 0)


def test_min_max_single_sample():
    lst = ListSeries("L", DATE, [Sample(1.0, 3.0, -1.0)])
    assert lst.min_max_difference == (4.0, 4.0)
    arr = ArraySeries("A", DATE, [1.0], [3.0, -1.0])
    assert arr.min_max_difference == (4.0, 4.0)


def test_min_max_uses_complex_magnitude():
    lst = ListSeries("L", DATE, [Sample(0.0, 3 + 4j, 0j), Sample(1.0, 1j, 0j)])
    assert lst.min_max_difference == pytest.approx((1.0, 5.0))
    arr = ArraySeries("A", DATE, [0.0, 1.0], [3 + 4j, 0j, 1j, 0j])
    assert arr.min_max_difference == pytest.approx((1.0, 5.0))


def test_iteration_is_restartable():
    series = ArraySeries.from_function("A", DATE, [1.0, 2.0], fvalues)
    assert list(series) == list(series)
    assert [s.x for s in series] == [1.0, 2.0]


def test_render_long_one_line_per_sample():
    series = ArraySeries.from_function("A", DATE, [1.0, 2.0], fvalues)
    lines = series.render_long(".2f").splitlines()
    assert lines[0].startswith("ArraySeries: Key = A")
    assert lines[1:] == ["X: 1.00, Y1: 1.00, Y2: 3.00", "X: 2.00, Y1: 2.00, Y2: 6.00"]

    lst = ListSeries("L", DATE, [Sample(0.5, 1j, 2j)])
    assert lst.render_long(".1f").splitlines()[1] == "X: 0.5, Y1: 0.0+1.0j, Y2: 0.0+2.0j"


def test_both_variants_satisfy_protocol():
    assert isinstance(ListSeries("L", DATE), SeriesLike)
    assert isinstance(ArraySeries.empty("A", DATE), SeriesLike)


def test_array_series_equality():
    a = ArraySeries.from_function("A", DATE, [1.0, 2.0], fvalues)
    b = ArraySeries.from_function("A", DATE, [1.0, 2.0], fvalues)
    c = ArraySeries.from_function("A", DATE, [1.0, 2.5], fvalues)
    assert a == b
    assert a != c
