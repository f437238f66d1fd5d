"""
Reference ellipsoids on which the inverse problem is solved
"""

__all__ = ['Ellipsoid', 'GRS80', 'WGS84']

from functools import cached_property

from vincenty._const import GRS80_A, GRS80_F, WGS84_A, WGS84_F


class Ellipsoid:
    """
    An oblate spheroid described by its semi-major axis and flattening.

    Args:
        a:
            The semi-major axis, in meters

        f:
            The flattening, (a - b) / a
    """

    def __init__(self, a: float, f: float):
        a, f = float(a), float(f)
        if not a > 0:
            raise ValueError(f'semi-major axis {a!r} must be greater than 0')

        if not 0 <= f < 1:
            raise ValueError(f'flattening {f!r} outside [0, 1)')

        self._a = a
        self._f = f

    @property
    def a(self) -> float:
        return self._a

    @property
    def f(self) -> float:
        return self._f

    @cached_property
    def b(self) -> float:
        """The semi-minor axis, in meters"""
        return (1 - self.f) * self.a

    @cached_property
    def c2(self) -> float:
        """The second eccentricity squared, (a^2 - b^2) / b^2"""
        return (self.a * self.a - self.b * self.b) / (self.b * self.b)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, f={self.f})>'


WGS84 = Ellipsoid(WGS84_A, WGS84_F)
GRS80 = Ellipsoid(GRS80_A, GRS80_F)
