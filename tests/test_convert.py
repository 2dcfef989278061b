from datetime import datetime

import numpy as np
import pytest

from v1data.core import ArraySeries, ListSeries, to_array_series
from v1data.types import Sample

DATE = datetime(2024, 5, 1, 12, 0, 0)


def make_list(samples):
    return ListSeries("L", DATE, list(samples))


@pytest.mark.parametrize(
    "samples",
    [
        [],
        [Sample(0.1, 0.1, 0.3)],
        [Sample(0.1, 0.1, 0.3), Sample(0.2, 0.2, 0.6), Sample(0.05, -1.0, 2.0)],
        [Sample(1.0, 1 + 2j, 3 + 4j), Sample(2.0, 2 + 4j, 6 + 8j)],
    ],
)
def test_unique_coordinates_round_trip(samples):
    source = make_list(samples)
    result = to_array_series(source)
    assert isinstance(result, ArraySeries)
    assert result.length == source.length
    assert list(result) == source.samples
    assert (result.key, result.date) == (source.key, source.date)


def test_lookup_modes_agree_for_unique_coordinates():
    source = make_list([Sample(x, x, 3 * x) for x in (0.3, 0.1, 0.2)])
    assert to_array_series(source) == to_array_series(source, lookup="first_match")


def test_positional_copy_keeps_duplicate_coordinates():
    source = make_list([Sample(1.0, 1.0, 2.0), Sample(1.0, 5.0, 6.0)])
    result = to_array_series(source)
    np.testing.assert_allclose(result.x_nodes, [1.0, 1.0])
    np.testing.assert_allclose(result.values, [1.0, 2.0, 5.0, 6.0])


def test_first_match_aliases_duplicate_coordinates():
    source = make_list([Sample(2.0, 0.0, 0.0), Sample(1.0, 1.0, 2.0), Sample(1.0, 5.0, 6.0)])
    result = to_array_series(source, lookup="first_match")
    np.testing.assert_allclose(result.x_nodes, [2.0, 1.0, 1.0])
    np.testing.assert_allclose(result.values, [0.0, 0.0, 1.0, 2.0, 1.0, 2.0])


def test_result_is_independent_of_source():
    source = make_list([Sample(1.0, 1.0, 2.0)])
    result = to_array_series(source)
    source.append(Sample(2.0, 3.0, 4.0))
    assert result.length == 1
    result.values[0] = 42.0
    assert source.samples[0].y1 == 1.0


def test_kind_inference_and_override():
    real = make_list([Sample(1.0, 1.0, 2.0)])
    assert to_array_series(real).kind == "real"
    assert to_array_series(real, kind="complex").kind == "complex"
    cplx = make_list([Sample(1.0, 1.0, 2j)])
    assert to_array_series(cplx).kind == "complex"


def test_unknown_lookup_mode():
    with pytest.raises(ValueError):
        to_array_series(make_list([]), lookup="last_match")
