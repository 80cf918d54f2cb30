import numpy as np
import pytest

from plinterp.lib import bracket_1, first_outside, is_ascending

X = np.array([0.0, 1.0, 1.0, 2.5, 4.0])


@pytest.mark.parametrize(
    "x,k",
    [
        (0.0, 0),
        (0.5, 0),
        (1.0, 0),  # first interval wins at a knot
        (2.0, 2),
        (2.5, 2),
        (4.0, 3),
        (-0.1, -1),
        (4.1, -1),
        (np.nan, -1),
    ],
)
def test_bracket_1(x, k):
    assert bracket_1(x, X) == k


def test_bracket_1_short():
    assert bracket_1(1.0, np.array([1.0])) == -1
    assert bracket_1(1.0, np.empty(0)) == -1


def test_first_outside():
    xi = np.array([0.0, 2.0, 4.0])
    assert first_outside(xi, 0.0, 4.0) == -1
    assert first_outside(xi, 0.5, 4.0) == 0
    assert first_outside(xi, 0.0, 3.0) == 2
    assert first_outside(np.array([1.0, np.nan]), 0.0, 4.0) == 1
    assert first_outside(np.empty(0), 0.0, 4.0) == -1


def test_is_ascending():
    assert is_ascending(X)
    assert is_ascending(np.array([3.0]))
    assert not is_ascending(X[::-1].copy())
