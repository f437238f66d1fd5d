import numpy as np
import pytest
from pytest import approx

from vincenty import ConvergenceError, GeoPoint, GRS80
from vincenty.track import *


def _equator(*lons):
    return [GeoPoint.from_degrees(0., lon) for lon in lons]


def test_leg_distances():
    legs = leg_distances(_equator(0., 1., 2.))
    assert isinstance(legs, np.ndarray)
    assert legs.shape == (2,)
    assert legs.tolist() == approx([111319.491, 111319.491], abs=1e-3)

    # Meridian
    points = [GeoPoint.from_degrees(lat, 0.) for lat in (0., 1., 2.)]
    assert leg_distances(points).sum() == approx(221149.453, abs=1e-3)


def test_leg_distances_short():
    assert leg_distances([]).shape == (0,)
    assert leg_distances(_equator(0.)).shape == (0,)

    # Repeated points contribute nothing
    assert leg_distances(_equator(1., 1.)).tolist() == approx([0.])


def test_leg_distances_kwargs():
    points = _equator(0., 1.)
    assert leg_distances(points, ellipsoid=GRS80)[0] == approx(111319.491, abs=1e-3)

    with pytest.raises(ValueError):
        leg_distances(points, tol=0.)

    with pytest.raises(ConvergenceError):
        leg_distances([GeoPoint(0., 0.), GeoPoint.from_degrees(0.5, 179.7)])


def test_cumulative_distances():
    totals = cumulative_distances(_equator(0., 1., 2.))
    assert totals.tolist() == approx([0., 111319.491, 222638.982], abs=1e-3)

    assert cumulative_distances(_equator(0.)).tolist() == approx([0.])
    assert cumulative_distances([]).shape == (0,)


def test_track_length():
    assert track_length(_equator(0., 1., 2.)) == approx(222638.982, abs=1e-3)
    assert track_length(_equator(0., 0.5, 1., 1.5, 2.), max_iter=50) == approx(
        222638.982, abs=1e-3
    )
    assert track_length([]) == 0.
    assert isinstance(track_length(_equator(0., 1.)), float)
