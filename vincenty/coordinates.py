"""
Representation of a specific point on the ellipsoid
"""

__all__ = ['GeoPoint']

import math
from typing import Tuple, Union


_HALF_PI = math.pi / 2


class GeoPoint:
    """
    A latitude/longitude pair, in radians.

    Latitude must fall within [-pi/2, pi/2] and longitude within [-pi, pi]. Points are
    immutable and compare exactly, so two points are only equal when both of their
    coordinates are bit-for-bit identical.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not -_HALF_PI <= lat <= _HALF_PI:
            raise ValueError(f'latitude {lat!r} outside [-pi/2, pi/2]')

        if not -math.pi <= lon <= math.pi:
            raise ValueError(f'longitude {lon!r} outside [-pi, pi]')

        self._latitude = lat
        self._longitude = lon

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __iter__(self):
        return iter((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> 'GeoPoint':
        """Creates a GeoPoint from a latitude/longitude pair expressed in degrees"""
        return cls(math.radians(latitude), math.radians(longitude))

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[float, float, float, str],
        lon: Tuple[float, float, float, str]
    ) -> 'GeoPoint':
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[float, float, float, str], quadrants: str):
            quadrant = dms[3].upper()
            if quadrant not in quadrants:
                raise ValueError(
                    f'Unrecognized quadrant {dms[3]!r}; expected one of {", ".join(quadrants)}'
                )
            mult = -1 if quadrant in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls.from_degrees(convert(lat, 'NS'), convert(lon, 'EW'))

    def to_degrees(self) -> Tuple[float, float]:
        """Returns the (latitude, longitude) pair in degrees"""
        return math.degrees(self.latitude), math.degrees(self.longitude)
