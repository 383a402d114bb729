import numpy as np
import pytest

from vecmath import EPS, approx_equal, snap_zero


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1.0, 1.0, True),
        (1.0, 1.0 + 5e-7, True),
        (1.0, 1.0 + 2e-6, False),
        (0.0, -9e-7, True),
        (0.0, EPS, False),
    ],
)
def test_approx_equal_uses_strict_bound(a, b, expected):
    assert approx_equal(a, b) is expected


def test_approx_equal_custom_epsilon():
    assert approx_equal(1.0, 1.05, epsilon=0.1)
    assert not approx_equal(1.0, 1.05, epsilon=0.01)


def test_snap_zero_keeps_scalar_type():
    snapped = snap_zero(np.float32(3e-7))
    assert snapped == 0.0
    assert isinstance(snapped, np.float32)
    assert snap_zero(0.5) == 0.5
    assert snap_zero(-1e-9) == 0.0
