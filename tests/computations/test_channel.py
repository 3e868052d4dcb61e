import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from computations.channel import clamp_to_channel


@given(value=st.integers(max_value=0))
def test_non_positive_values_clamp_to_zero(value: int):
    assert clamp_to_channel(value) == 0


@given(value=st.integers(min_value=255))
def test_large_values_saturate(value: int):
    assert clamp_to_channel(value) == 255


@given(value=st.integers(min_value=0, max_value=255))
def test_in_range_integers_are_unchanged(value: int):
    assert clamp_to_channel(value) == value


@given(value=st.floats(min_value=0, max_value=255))
def test_in_range_floats_are_truncated(value: float):
    assert clamp_to_channel(value) == math.trunc(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(2**64 + 1, 255, id="beyond 64 bits"),
        pytest.param(-(2**64), 0, id="negative beyond 64 bits"),
        pytest.param(math.inf, 255, id="positive infinity"),
        pytest.param(-math.inf, 0, id="negative infinity"),
        pytest.param(-0.9, 0, id="small negative float"),
        pytest.param(254.999, 254, id="truncates toward zero"),
    ],
)
def test_clamp_edge_values(value: int | float, expected: int):
    assert clamp_to_channel(value) == expected
    assert isinstance(clamp_to_channel(value), int)
