import pytest
from pytest import approx

from vincenty.ellipsoid import *


def test_ellipsoid_derived():
    assert WGS84.a == 6378137.0
    assert WGS84.f == 1 / 298.257223563
    assert WGS84.b == approx(6356752.314245, abs=1e-6)
    assert WGS84.c2 == approx(0.006739496742, rel=1e-9)

    # A sphere has no eccentricity
    sphere = Ellipsoid(6_371_000., 0.)
    assert sphere.b == sphere.a
    assert sphere.c2 == 0.


def test_ellipsoid_invalid():
    with pytest.raises(ValueError, match='semi-major'):
        Ellipsoid(0., 0.003)

    with pytest.raises(ValueError, match='flattening'):
        Ellipsoid(6378137.0, 1.)

    with pytest.raises(ValueError, match='flattening'):
        Ellipsoid(6378137.0, -0.1)


def test_ellipsoid_eq():
    assert WGS84 == Ellipsoid(6378137.0, 1 / 298.257223563)
    assert WGS84 != GRS80
    assert WGS84 != (6378137.0, 1 / 298.257223563)
    assert len({WGS84, GRS80, Ellipsoid(6378137.0, 1 / 298.257223563)}) == 2


def test_ellipsoid_repr():
    assert repr(Ellipsoid(1., 0.5)) == '<Ellipsoid(a=1.0, f=0.5)>'
