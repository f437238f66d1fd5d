import pytest
from vincenty.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'km', 1000.0),
        (1.0, 'mi', 1609.344),
        (1.0, 'ft', 0.3048),
        (1.0, 'NMI', 1852.0),
        (1.0, 'yd', 0.9144),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)


def test_convert_from_meters():
    assert convert_from_meters(1852.0, 'nmi') == pytest.approx(1.)
    assert convert_from_meters(2500.0, 'km') == pytest.approx(2.5)
    assert convert_from_meters(0.9144, 'yd') == pytest.approx(1.)

    # Round trip through an intermediate unit
    assert convert_to_meters(convert_from_meters(123.4, 'ft'), 'ft') == pytest.approx(123.4)


def test_convert_unknown_unit():
    with pytest.raises(ValueError, match='Unknown unit'):
        convert_to_meters(1.0, 'furlong')

    with pytest.raises(ValueError, match='Unknown unit'):
        convert_from_meters(1.0, 'league')
