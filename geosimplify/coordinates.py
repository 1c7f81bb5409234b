"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Optional, Tuple, Union

from geosimplify.ellipsoid import Ellipsoid, WGS84
from geosimplify.exceptions import InvalidArgument
from geosimplify.utils.functions import ensure_finite


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair) referenced
    to an ellipsoid.

    Coordinates are immutable. Out-of-range values are rejected rather than
    wrapped, so a typo'd latitude can't silently land on the other side of a pole.

    Args:
        latitude:
            Degrees north, in [-90, 90]

        longitude:
            Degrees east, in [-180, 180]

        ellipsoid:
            (Default WGS-84) The reference ellipsoid. The instance is shared, not copied.

    Raises:
        InvalidArgument
    """

    __slots__ = ('_latitude', '_longitude', '_ellipsoid')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        ellipsoid: Optional[Ellipsoid] = None,
    ):
        lat = ensure_finite(latitude, 'latitude')
        lon = ensure_finite(longitude, 'longitude')

        if not -90 <= lat <= 90:
            raise InvalidArgument(f'Latitude must be within [-90, 90], got {lat}')

        if not -180 <= lon <= 180:
            raise InvalidArgument(f'Longitude must be within [-180, 180], got {lon}')

        if ellipsoid is None:
            ellipsoid = WGS84
        elif not isinstance(ellipsoid, Ellipsoid):
            raise InvalidArgument(f'Expected an Ellipsoid, got {type(ellipsoid).__name__}')

        object.__setattr__(self, '_latitude', lat)
        object.__setattr__(self, '_longitude', lon)
        object.__setattr__(self, '_ellipsoid', ellipsoid)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.ellipsoid))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    def __reduce__(self):
        return self.__class__, (self.latitude, self.longitude, self.ellipsoid)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude), the
        order used by GeoJSON and WKT.

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        lon, lat = self.to_float(reverse)
        return str(lon), str(lat)

    def with_ellipsoid(self, ellipsoid: Ellipsoid) -> 'Coordinate':
        """Returns the same lat/lon pair referenced to a different ellipsoid"""
        return Coordinate(self.latitude, self.longitude, ellipsoid)

    def is_coincident(self, other: 'Coordinate') -> bool:
        """
        Whether two coordinates name the same place on the globe. Longitude is
        meaningless at the poles, and -180/180 are the same meridian.
        """
        if self.latitude != other.latitude:
            return False

        if abs(self.latitude) == 90:
            return True

        return (
            self.longitude == other.longitude or
            abs(self.longitude - other.longitude) == 360
        )

    def get_distance(self, other: 'Coordinate', calculator=None) -> float:
        """
        The distance to another coordinate, in meters.

        Args:
            other:
                The Coordinate to measure to

            calculator:
                (Default VincentyDistance) A DistanceCalculator

        Returns:
            float
        """
        from geosimplify.geodesic import VincentyDistance  # pylint: disable=import-outside-toplevel

        return (calculator or VincentyDistance()).get_distance(self, other)
