import math

import pytest
from pytest import approx

from geosimplify import Coordinate, Ellipsoid, WGS84
from geosimplify.exceptions import InvalidArgument
from geosimplify.geodesic import HaversineDistance


def test_coordinate_init():
    c = Coordinate(52.5, 13.5)
    assert c.latitude == 52.5
    assert c.longitude == 13.5
    assert c.ellipsoid is WGS84

    c = Coordinate('52.5', '13.5')
    assert c.latitude == 52.5
    assert c.longitude == 13.5

    # Boundaries are inclusive
    assert Coordinate(90, 180).to_float() == (180., 90.)
    assert Coordinate(-90, -180).to_float() == (-180., -90.)

    # Ellipsoid is shared, not copied
    grs80 = Ellipsoid.from_name('GRS-80')
    assert Coordinate(0., 0., grs80).ellipsoid is grs80


@pytest.mark.parametrize(
    'lat,lon',
    [
        ('foo', 13.5),
        (52.5, 'foo'),
        (None, 13.5),
        (True, 13.5),
        (math.nan, 13.5),
        (52.5, math.inf),
        (90.0001, 0.),
        (-91, 0.),
        (0., 180.5),
        (0., -181),
    ]
)
def test_coordinate_init_invalid(lat, lon):
    with pytest.raises(InvalidArgument):
        Coordinate(lat, lon)


def test_coordinate_init_invalid_ellipsoid():
    with pytest.raises(InvalidArgument):
        Coordinate(0., 0., 'WGS-84')

    # Also a ValueError, for callers that don't know about geosimplify errors
    with pytest.raises(ValueError):
        Coordinate(100., 0.)


def test_coordinate_immutable():
    c = Coordinate(52.5, 13.5)
    with pytest.raises(AttributeError):
        c.latitude = 0.

    with pytest.raises(AttributeError):
        c.foo = 'bar'


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) == Coordinate(0, '0')
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != Coordinate(0., 0., Ellipsoid.from_name('GRS-80'))
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)


def test_coordinate_repr():
    assert repr(Coordinate(52.5, 13.5)) == '<Coordinate(52.5, 13.5)>'


def test_coordinate_to_float():
    assert Coordinate(52.5, 13.5).to_float() == (13.5, 52.5)
    assert Coordinate(52.5, 13.5).to_float(reverse=True) == (52.5, 13.5)


def test_coordinate_to_str():
    assert Coordinate(52.5, 13.5).to_str() == ('13.5', '52.5')
    assert Coordinate(52.5, 13.5).to_str(reverse=True) == ('52.5', '13.5')


def test_coordinate_with_ellipsoid():
    grs80 = Ellipsoid.from_name('GRS-80')
    c = Coordinate(52.5, 13.5).with_ellipsoid(grs80)
    assert c.ellipsoid is grs80
    assert c.to_float() == (13.5, 52.5)


def test_coordinate_get_distance(hawaii):
    start, end = hawaii
    assert start.get_distance(end) == approx(128130.850, abs=1e-3)
    assert end.get_distance(start) == approx(128130.850, abs=1e-3)
    assert start.get_distance(start) == 0.

    assert start.get_distance(end, HaversineDistance()) == approx(
        HaversineDistance().get_distance(start, end)
    )


def test_coordinate_is_coincident():
    assert Coordinate(52.5, 13.5).is_coincident(Coordinate(52.5, 13.5))
    assert not Coordinate(52.5, 13.5).is_coincident(Coordinate(52.5, 13.6))
    assert not Coordinate(52.5, 13.5).is_coincident(Coordinate(52.6, 13.5))

    # Longitude is irrelevant at the poles
    assert Coordinate(90, 0).is_coincident(Coordinate(90, 50))
    assert Coordinate(-90, -10).is_coincident(Coordinate(-90, 170))
    assert not Coordinate(90, 0).is_coincident(Coordinate(-90, 0))

    # Both sides of the antimeridian
    assert Coordinate(10, 180).is_coincident(Coordinate(10, -180))
