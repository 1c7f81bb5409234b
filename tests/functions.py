import pytest
from pytest import approx

from geosimplify import Coordinate, GeoLineString, GeoPolygon


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
        assert c1.ellipsoid == c2.ellipsoid
    except AssertionError as e:
        raise AssertionError(f"Coordinates are not equal: {c1} != {c2}") from e


def assert_paths_equal(p1, p2, abs_tol=1e-7):
    """
    Helper to compare two GeoLineStrings/GeoPolygons using approximate equality for coordinates.
    """
    assert type(p1) is type(p2)
    assert len(p1) == len(p2)
    for c1, c2 in zip(p1, p2):
        assert_coordinates_equal(c1, c2, abs_tol=abs_tol)


# Roughly 99.5 meters of latitude near the equator
LAT_STEP = 0.0009


@pytest.fixture
def hawaii():
    return Coordinate(19.820664, -155.468066), Coordinate(20.709722, -156.253333)


@pytest.fixture
def straight_line():
    """Ten points heading due north along the prime meridian, ~99.5m apart"""
    return GeoLineString([Coordinate(i * LAT_STEP, 0.) for i in range(10)])


@pytest.fixture
def right_angle():
    """500m north, then 500m east"""
    return GeoLineString([
        Coordinate(0., 0.),
        Coordinate(0.00452185, 0.),
        Coordinate(0.00452185, 0.00449158),
    ])


@pytest.fixture
def square_ring():
    """A ~1km square ring with a midpoint on every side; not explicitly closed"""
    return GeoPolygon([
        Coordinate(0., 0.),
        Coordinate(0., 0.0045),
        Coordinate(0., 0.009),
        Coordinate(0.0045, 0.009),
        Coordinate(0.009, 0.009),
        Coordinate(0.009, 0.0045),
        Coordinate(0.009, 0.),
        Coordinate(0.0045, 0.),
    ])
