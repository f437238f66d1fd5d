from vincenty._version import __version__  # noqa: F401
from vincenty.utils.logging import LOGGER
from vincenty.config import SolverConfig
from vincenty.coordinates import GeoPoint
from vincenty.ellipsoid import Ellipsoid, GRS80, WGS84
from vincenty.exceptions import ConvergenceError
from vincenty.inverse import InverseResult, distance, solve, solve_inverse, wrap2pi
from vincenty.track import cumulative_distances, leg_distances, track_length


__all__ = [
    'ConvergenceError',
    'Ellipsoid',
    'GeoPoint',
    'GRS80',
    'InverseResult',
    'SolverConfig',
    'WGS84',
    'cumulative_distances',
    'distance',
    'leg_distances',
    'solve',
    'solve_inverse',
    'track_length',
    'wrap2pi',
    'LOGGER',
]
