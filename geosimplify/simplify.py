"""
Reduces the number of points in a GeoLineString or GeoPolygon while bounding the
drift in both position and heading.
"""

__all__ = ['SimplifierBase', 'SimplifyBearingAndDistance', 'simplify']

from abc import ABC, abstractmethod
import copy
from typing import List, Optional, TypeVar

from geosimplify.coordinates import Coordinate
from geosimplify.exceptions import InvalidArgument, InvariantViolation
from geosimplify.geodesic import (
    BearingCalculator, DistanceCalculator, EllipsoidalBearing, VincentyDistance
)
from geosimplify.structures import GeoLineString, GeoPolygon
from geosimplify.utils.functions import ensure_finite
from geosimplify.utils.mixins import LoggingMixin

PATH_TYPE = TypeVar('PATH_TYPE', GeoLineString, GeoPolygon)


class SimplifierBase(LoggingMixin, ABC):
    """
    Interface for simplification algorithms. Subclasses implement _simplify_vertices();
    simplify() handles type checks, trivial inputs and rebuilding the geometry.
    """

    def simplify(self, geometry: PATH_TYPE) -> PATH_TYPE:
        """
        Simplifies a GeoLineString or GeoPolygon. The input is never modified.

        Args:
            geometry:
                The GeoLineString (open) or GeoPolygon (closed ring) to simplify

        Returns:
            A new geometry of the same type with the same properties and at most
            as many vertices

        Raises:
            InvalidArgument if the geometry is neither a GeoLineString nor a GeoPolygon
        """
        if not isinstance(geometry, (GeoLineString, GeoPolygon)):
            raise InvalidArgument(
                f'Only GeoLineString and GeoPolygon can be simplified, not {type(geometry).__name__}'
            )

        points = geometry.vertices
        # No simplification is meaningful below three points (four distinct for a ring)
        if isinstance(geometry, GeoPolygon):
            distinct = len(points) - 1 if geometry.is_explicitly_closed else len(points)
            if distinct <= 3:
                return geometry.copy()
        elif len(points) < 3:
            return geometry.copy()

        result = self._build(geometry, self._simplify_vertices(points))

        if type(result) is not type(geometry):
            raise InvariantViolation(
                f'Simplifying a {type(geometry).__name__} produced a {type(result).__name__}'
            )

        self.logger.debug(
            'Simplified %s from %d to %d points',
            type(geometry).__name__, len(points), len(result)
        )
        return result

    def _build(self, geometry: PATH_TYPE, points: List[Coordinate]) -> PATH_TYPE:
        """Wraps the retained points in a geometry like the input, with its properties"""
        return geometry.__class__(points, properties=copy.deepcopy(geometry.properties))

    @abstractmethod
    def _simplify_vertices(self, points: tuple) -> List[Coordinate]:
        """Returns the retained subset of points, in their original order"""


class SimplifyBearingAndDistance(SimplifierBase):
    """
    Greedy, single-pass simplification that considers both bearing changes and
    the distance from the last retained point.

    Walking from the first point, each interior point is kept when either
        - it lies further than distance_limit from the last kept point, or
        - the heading changes noticeably there, with the required change shrinking
          as the distance covered grows:
              (d(i-1, i) + d(i, i+1)) > min(5, limit / 3)   and change > 2 * bearing_angle
              (d(i-1, i) + d(i, i+1)) > min(10, limit / 3)  and change > bearing_angle
              (d(last, i) + d(i, i+1)) > min(10, limit / 3) and change > bearing_angle
    The first and last points are always kept.

    Args:
        bearing_angle:
            Heading change threshold, in degrees (>= 0)

        distance_limit:
            Maximum distance between consecutive retained points, in meters (> 0)

        distance_calculator:
            (Default VincentyDistance) How distances are measured

        bearing_calculator:
            (Default EllipsoidalBearing) How headings are measured
    """

    def __init__(
        self,
        bearing_angle: float,
        distance_limit: float,
        distance_calculator: Optional[DistanceCalculator] = None,
        bearing_calculator: Optional[BearingCalculator] = None,
    ):
        super().__init__()
        bearing_angle = ensure_finite(bearing_angle, 'bearing_angle')
        if bearing_angle < 0:
            raise InvalidArgument(f'bearing_angle must not be negative, got {bearing_angle}')

        distance_limit = ensure_finite(distance_limit, 'distance_limit')
        if distance_limit <= 0:
            raise InvalidArgument(f'distance_limit must be positive, got {distance_limit}')

        self.bearing_angle = bearing_angle
        self.distance_limit = distance_limit
        self.distance_calculator = distance_calculator or VincentyDistance()
        self.bearing_calculator = bearing_calculator or EllipsoidalBearing()

    def __repr__(self):
        return (
            f'<SimplifyBearingAndDistance bearing_angle={self.bearing_angle}, '
            f'distance_limit={self.distance_limit}>'
        )

    def _simplify_vertices(self, points: tuple) -> List[Coordinate]:
        get_distance = self.distance_calculator.get_distance
        get_bearing = self.bearing_calculator.calculate_bearing
        third = self.distance_limit / 3

        result = [points[0]]
        last_kept = 0

        for index in range(1, len(points)):
            if index == len(points) - 1:
                result.append(points[index])
                break

            previous, current, following = points[index - 1], points[index], points[index + 1]

            distance_to_last = get_distance(points[last_kept], current)
            if distance_to_last > self.distance_limit:
                result.append(current)
                last_kept = index
                continue

            if previous.is_coincident(current) or current.is_coincident(following):
                # A zero-length segment has no heading to deviate from
                bearing_difference = 0.
            else:
                bearing1 = get_bearing(previous, current)
                bearing2 = get_bearing(current, following)
                bearing_difference = min(
                    (bearing1 - bearing2 + 360) % 360,
                    (bearing2 - bearing1 + 360) % 360,
                )

            new_segment_length = get_distance(current, following)
            distance_both = get_distance(previous, current) + new_segment_length
            distance_from_last = distance_to_last + new_segment_length

            if (
                (distance_both > min(5, third) and bearing_difference > self.bearing_angle * 2) or
                (distance_both > min(10, third) and bearing_difference > self.bearing_angle) or
                (distance_from_last > min(10, third) and bearing_difference > self.bearing_angle)
            ):
                result.append(points[index])
                last_kept = index

        return result


def simplify(
    geometry: PATH_TYPE,
    bearing_angle: float,
    distance_limit: float,
    distance_calculator: Optional[DistanceCalculator] = None,
    bearing_calculator: Optional[BearingCalculator] = None,
) -> PATH_TYPE:
    """
    Simplifies a GeoLineString or GeoPolygon by bearing and distance. See
    SimplifyBearingAndDistance for the retention rules.

    Args:
        geometry:
            The GeoLineString or GeoPolygon to simplify

        bearing_angle:
            Heading change threshold, in degrees

        distance_limit:
            Maximum distance between consecutive retained points, in meters

    Returns:
        A new geometry of the same type

    Raises:
        InvalidArgument
    """
    return SimplifyBearingAndDistance(
        bearing_angle,
        distance_limit,
        distance_calculator=distance_calculator,
        bearing_calculator=bearing_calculator,
    ).simplify(geometry)
