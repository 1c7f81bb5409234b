"""
Ordered point containers: a two-point line, an open linestring, and a closed polygon ring
"""

__all__ = ['GeoLine', 'GeoLineString', 'GeoPolygon', 'PathBase']

from abc import ABC, abstractmethod
import copy
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np
from typing_extensions import Self

from geosimplify.coordinates import Coordinate
from geosimplify.exceptions import InvalidArgument
from geosimplify.geodesic import (
    BearingCalculator, DistanceCalculator, EllipsoidalBearing, VincentyDistance
)
from geosimplify.utils.functions import round_half_up


def _ensure_coordinates(vertices: Iterable[Coordinate]) -> Tuple[Coordinate, ...]:
    """Copies vertices into an owned tuple, rejecting anything that isn't a Coordinate"""
    out = tuple(vertices)
    for vertex in out:
        if not isinstance(vertex, Coordinate):
            raise InvalidArgument(f'Expected Coordinate vertices, got {type(vertex).__name__}')

    return out


class GeoLine:
    """
    A single segment between two Coordinates.

    Args:
        point1:
            The start Coordinate

        point2:
            The end Coordinate
    """

    def __init__(self, point1: Coordinate, point2: Coordinate):
        self.point1, self.point2 = _ensure_coordinates((point1, point2))

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoLine):
            return False

        return self.point1 == other.point1 and self.point2 == other.point2

    def __hash__(self) -> int:
        return hash((self.point1, self.point2))

    def __repr__(self) -> str:
        return f'<GeoLine {self.point1} -> {self.point2}>'

    def bearing(self, calculator: Optional[BearingCalculator] = None) -> float:
        """The initial bearing from point1 towards point2"""
        return (calculator or EllipsoidalBearing()).calculate_bearing(self.point1, self.point2)

    def final_bearing(self, calculator: Optional[BearingCalculator] = None) -> float:
        """The direction of travel on arrival at point2"""
        return (calculator or EllipsoidalBearing()).calculate_final_bearing(self.point1, self.point2)

    def length(self, calculator: Optional[DistanceCalculator] = None) -> float:
        """The distance between the two points, in meters"""
        return (calculator or VincentyDistance()).get_distance(self.point1, self.point2)

    def reverse(self) -> 'GeoLine':
        """A new GeoLine running in the opposite direction"""
        return GeoLine(self.point2, self.point1)


class PathBase(ABC):

    """
    Shared behavior for ordered vertex sequences. Vertices are copied into a tuple
    at construction, so a path never aliases (or mutates) the caller's list.

    Args:
        vertices:
            The ordered Coordinates describing the path

        properties:
            Additional properties that describe this geometry.
    """

    def __init__(
        self,
        vertices: Iterable[Coordinate],
        properties: Optional[Dict] = None,
    ):
        self._vertices = _ensure_coordinates(vertices)
        self._properties = dict(properties or {})

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return False

        return self.vertices == other.vertices

    def __getitem__(self, item):
        return self._vertices[item]

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._vertices))

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    @abstractmethod
    def __geo_interface__(self):
        pass

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """
        The longitude and latitude min/max bounds of the path.

        Returns:
            (min_longitude, min_latitude, max_longitude, max_latitude)
        """
        if not self._vertices:
            raise ValueError(f'{self.__class__.__name__} has no vertices.')

        arr = np.array([x.to_float() for x in self._vertices])
        min_lon, min_lat = arr.min(axis=0)
        max_lon, max_lat = arr.max(axis=0)
        return float(min_lon), float(min_lat), float(max_lon), float(max_lat)

    @property
    def centroid(self) -> Coordinate:
        """The mean of the vertices (not a geodesic centroid)"""
        if not self._vertices:
            raise ValueError(f'{self.__class__.__name__} has no vertices.')

        lon, lat = [
            round_half_up(float(x), 7)
            for x in np.array([y.to_float() for y in self._vertices]).mean(axis=0)
        ]
        return Coordinate(lat, lon, self._vertices[0].ellipsoid)

    @property
    def properties(self) -> Dict:
        return self._properties.copy()

    @property
    def vertices(self) -> Tuple[Coordinate, ...]:
        return self._vertices

    @property
    @abstractmethod
    def segments(self) -> List[Tuple[Coordinate, Coordinate]]:
        """The (start, end) pairs joining consecutive vertices"""

    def copy(self) -> Self:
        return self.__class__(
            self._vertices,
            properties=copy.deepcopy(self._properties),
        )

    def length(self, calculator: Optional[DistanceCalculator] = None) -> float:
        """
        The summed length of all segments, in meters.

        Args:
            calculator:
                (Default VincentyDistance) The distance calculator to measure with

        Returns:
            float
        """
        return float(self.segment_lengths(calculator).sum())

    def reverse(self) -> Self:
        """A new geometry of the same kind with the vertex order reversed"""
        return self.__class__(
            self._vertices[::-1],
            properties=copy.deepcopy(self._properties),
        )

    def segment_bearings(self, calculator: Optional[BearingCalculator] = None) -> np.ndarray:
        """
        The initial bearing of each segment, in degrees.

        Raises:
            DegenerateInputError if any segment joins coincident points
        """
        calculator = calculator or EllipsoidalBearing()
        return np.array(
            [calculator.calculate_bearing(start, end) for start, end in self.segments],
            dtype=float,
        )

    def segment_lengths(self, calculator: Optional[DistanceCalculator] = None) -> np.ndarray:
        """The length of each segment, in meters"""
        calculator = calculator or VincentyDistance()
        return np.array(
            [calculator.get_distance(start, end) for start, end in self.segments],
            dtype=float,
        )

    @staticmethod
    def _linear_ring_to_wkt(ring: Iterable[Coordinate]) -> str:
        return f'({", ".join(" ".join(coord.to_str()) for coord in ring)})'

    @abstractmethod
    def to_wkt(self) -> str:
        """
        Converts the geometry to its WKT string representation

        Returns:
            str
        """


class GeoLineString(PathBase):

    """
    A LineString (or more colloquially, a path) consisting of an open, ordered
    series of Coordinates.
    """

    def __repr__(self) -> str:
        return f'<GeoLineString with {len(self._vertices)} points>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'LineString',
            'coordinates': [list(x.to_float()) for x in self._vertices],
        }

    @property
    def segments(self) -> List[Tuple[Coordinate, Coordinate]]:
        return list(zip(self._vertices, self._vertices[1:]))

    def to_wkt(self) -> str:
        return f'LINESTRING {self._linear_ring_to_wkt(self._vertices)}'


class GeoPolygon(PathBase):

    """
    A Polygon outline, expressed as a closed ring of Coordinates. The ring is
    implicitly closed: the final vertex connects back to the first, which need
    not be repeated. If the caller does repeat it, it is kept as given.
    """

    def __repr__(self) -> str:
        return f'<GeoPolygon of {len(self._vertices)} coordinates>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'Polygon',
            'coordinates': [[list(x.to_float()) for x in self.linear_ring()]],
        }

    @property
    def is_explicitly_closed(self) -> bool:
        """Whether the final vertex repeats the first"""
        return len(self._vertices) > 1 and self._vertices[0] == self._vertices[-1]

    @property
    def segments(self) -> List[Tuple[Coordinate, Coordinate]]:
        ring = self.linear_ring()
        return list(zip(ring, ring[1:]))

    def linear_ring(self) -> List[Coordinate]:
        """The vertices, closed back onto the first one"""
        if not self._vertices or self.is_explicitly_closed:
            return list(self._vertices)

        return [*self._vertices, self._vertices[0]]

    def perimeter(self, calculator: Optional[DistanceCalculator] = None) -> float:
        """The length of the ring including its closing edge, in meters"""
        return self.length(calculator)

    def to_wkt(self) -> str:
        return f'POLYGON ({self._linear_ring_to_wkt(self.linear_ring())})'
