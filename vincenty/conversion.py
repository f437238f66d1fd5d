"""
Module for unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters']

_METERS_PER_UNIT = {
    'm': 1.0,
    'km': 1000.0,
    'mi': 1609.344,
    'ft': 0.3048,
    'nmi': 1852.0,
    'yd': 0.9144,
}


def _factor(unit: str) -> float:
    try:
        return _METERS_PER_UNIT[unit.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown unit '{unit}'. Options: {list(_METERS_PER_UNIT.keys())}"
        ) from None


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit. Accepts the same units as
    convert_to_meters.
    """
    return distance / _factor(unit)
