import math

from pytest import approx


def assert_angles_equal(a1: float, a2: float, abs_tol=1e-3):
    """
    Asserts that two angles in radians are equal within a specified absolute tolerance,
    treating angles either side of 0 / 2pi as adjacent.

    Args:
        a1: The first angle
        a2: The second angle
        abs_tol: The absolute tolerance, in radians
    """
    diff = (a1 - a2) % (2 * math.pi)
    assert min(diff, 2 * math.pi - diff) == approx(0., abs=abs_tol), \
        f'{a1} != {a2} (+/- {abs_tol})'
