"""
Geodesic distance and bearing calculators.

Vincenty's inverse formula (ellipsoid) is the default for both distance and bearing.
Spherical (haversine) and Karney (geographiclib) variants implement the same
interfaces and can be used anywhere a calculator is accepted.
"""

__all__ = [
    'BearingCalculator', 'DistanceCalculator', 'EllipsoidalBearing',
    'HaversineDistance', 'KarneyBearing', 'KarneyDistance', 'SphericalBearing',
    'VincentyDistance', 'distance', 'final_bearing', 'initial_bearing',
]

from abc import ABC, abstractmethod
import math
from typing import Optional

from geosimplify._const import VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
from geosimplify.coordinates import Coordinate
from geosimplify.ellipsoid import Ellipsoid
from geosimplify.exceptions import ConvergenceFailure, DegenerateInputError, InvalidArgument
from geosimplify.utils.functions import ensure_finite
from geosimplify.utils.mixins import LoggingMixin


class _EllipsoidBound(LoggingMixin):
    """
    Shared configuration for calculators that operate on a reference ellipsoid.

    If an ellipsoid is given, coordinates are treated as plain lat/lon pairs on it.
    Otherwise both coordinates must reference ellipsoids with identical parameters.
    """

    def __init__(self, ellipsoid: Optional[Ellipsoid] = None):
        super().__init__()
        if ellipsoid is not None and not isinstance(ellipsoid, Ellipsoid):
            raise InvalidArgument(f'Expected an Ellipsoid, got {type(ellipsoid).__name__}')

        self.ellipsoid = ellipsoid

    def __repr__(self):
        name = self.ellipsoid.name if self.ellipsoid else 'coordinate ellipsoid'
        return f'<{self.__class__.__name__} on {name}>'

    def _resolve_ellipsoid(self, start: Coordinate, end: Coordinate) -> Ellipsoid:
        if self.ellipsoid is not None:
            if start.ellipsoid != self.ellipsoid or end.ellipsoid != self.ellipsoid:
                self.warn_once(
                    f'Coordinates referencing a different ellipsoid were measured on '
                    f'{self.ellipsoid.name}; this warning will not repeat.'
                )
            return self.ellipsoid

        if start.ellipsoid != end.ellipsoid:
            raise InvalidArgument(
                f'Coordinates reference different ellipsoids ({start.ellipsoid.name} '
                f'and {end.ellipsoid.name}); convert one or pass an explicit ellipsoid.'
            )

        return start.ellipsoid


class _VincentyIterative(_EllipsoidBound):
    """Adds the convergence policy used by Vincenty's iteration on lambda"""

    def __init__(
        self,
        ellipsoid: Optional[Ellipsoid] = None,
        tolerance: float = VINCENTY_TOLERANCE,
        max_iterations: int = VINCENTY_MAX_ITERATIONS,
    ):
        super().__init__(ellipsoid)
        tolerance = ensure_finite(tolerance, 'tolerance')
        if tolerance <= 0:
            raise InvalidArgument(f'tolerance must be positive, not {tolerance}')

        if isinstance(max_iterations, bool) or not isinstance(max_iterations, int) or max_iterations < 1:
            raise InvalidArgument(f'max_iterations must be a positive int, not {max_iterations!r}')

        self.tolerance = tolerance
        self.max_iterations = max_iterations


class DistanceCalculator(ABC):
    """Interface for anything that measures the distance between two Coordinates"""

    @abstractmethod
    def get_distance(self, start: Coordinate, end: Coordinate) -> float:
        """
        Calculates the distance between two coordinates.

        Args:
            start:
                The first Coordinate

            end:
                The second Coordinate

        Returns:
            (float) the distance in meters
        """


class BearingCalculator(ABC):
    """Interface for anything that measures the heading from one Coordinate to another"""

    @abstractmethod
    def calculate_bearing(self, start: Coordinate, end: Coordinate) -> float:
        """
        Calculates the initial bearing from start towards end.

        Returns:
            (float) degrees clockwise from true north, in [0, 360)
        """

    def calculate_final_bearing(self, start: Coordinate, end: Coordinate) -> float:
        """
        Calculates the direction of travel on arrival at end, by solving the
        reverse problem and turning it around.

        Returns:
            (float) degrees clockwise from true north, in [0, 360)
        """
        return (self.calculate_bearing(end, start) + 180) % 360


class VincentyDistance(_VincentyIterative, DistanceCalculator):
    """
    Distance on an ellipsoid using Vincenty's inverse formula. Accurate to well under
    a millimeter, but fails to converge for (nearly) antipodal points.

    Args:
        ellipsoid:
            (Default None) Measure on this ellipsoid instead of the coordinates' own

        tolerance:
            (Default 1e-12) Convergence threshold on lambda, in radians

        max_iterations:
            (Default 200) Iteration cap; ConvergenceFailure is raised beyond it
    """

    def get_distance(self, start: Coordinate, end: Coordinate) -> float:
        ellipsoid = self._resolve_ellipsoid(start, end)
        if start.is_coincident(end):
            return 0.0

        a, b, f = ellipsoid.parameters

        lon1, lat1 = math.radians(start.longitude), math.radians(start.latitude)
        lon2, lat2 = math.radians(end.longitude), math.radians(end.latitude)

        U1 = math.atan((1 - f) * math.tan(lat1))
        U2 = math.atan((1 - f) * math.tan(lat2))
        L = lon2 - lon1
        Lambda = L

        sinU1, cosU1 = math.sin(U1), math.cos(U1)
        sinU2, cosU2 = math.sin(U2), math.cos(U2)

        for iteration in range(1, self.max_iterations + 1):
            sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
            sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                                 (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

            if sinSigma == 0:
                return 0.0  # Coincident points

            cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
            sigma = math.atan2(sinSigma, cosSigma)
            sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
            cosSqAlpha = 1 - sinAlpha ** 2

            try:
                cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
            except ZeroDivisionError:
                cos2SigmaM = 0  # Equatorial line

            C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
            Lambda_prev = Lambda
            Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
            )

            if abs(Lambda - Lambda_prev) < self.tolerance:
                break
        else:
            raise ConvergenceFailure(
                f'Vincenty distance between {start} and {end} did not converge within '
                f'{self.max_iterations} iterations (nearly antipodal points?)',
                iterations=self.max_iterations,
                start=start,
                end=end,
            )

        self.logger.debug('Vincenty distance converged after %d iterations', iteration)

        uSq = cosSqAlpha * ellipsoid.second_eccentricity_squared
        A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
        B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
        deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
            )
        )

        return b * A * (sigma - deltaSigma)


class EllipsoidalBearing(_VincentyIterative, BearingCalculator):
    """
    Initial and final bearings on an ellipsoid, from the converged lambda of
    Vincenty's inverse formula.

    Args:
        ellipsoid:
            (Default None) Measure on this ellipsoid instead of the coordinates' own

        tolerance:
            (Default 1e-12) Convergence threshold on lambda, in radians

        max_iterations:
            (Default 200) Iteration cap; ConvergenceFailure is raised beyond it
    """

    def calculate_bearing(self, start: Coordinate, end: Coordinate) -> float:
        ellipsoid = self._resolve_ellipsoid(start, end)
        if start.is_coincident(end):
            raise DegenerateInputError(f'Bearing is undefined between coincident points {start}')

        f = ellipsoid.f

        lon1, lat1 = math.radians(start.longitude), math.radians(start.latitude)
        lon2, lat2 = math.radians(end.longitude), math.radians(end.latitude)

        U1 = math.atan((1 - f) * math.tan(lat1))
        U2 = math.atan((1 - f) * math.tan(lat2))
        L = lon2 - lon1
        Lambda = L

        sinU1, cosU1 = math.sin(U1), math.cos(U1)
        sinU2, cosU2 = math.sin(U2), math.cos(U2)

        for iteration in range(1, self.max_iterations + 1):
            sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

            # eq. 14
            sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                                 (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

            if sinSigma == 0:
                raise DegenerateInputError(
                    f'Bearing is undefined between coincident points {start} and {end}'
                )

            # eq. 15
            cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

            # eq. 16
            sigma = math.atan2(sinSigma, cosSigma)

            # eq. 17
            sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
            cosSqAlpha = 1 - sinAlpha ** 2

            # eq. 18
            try:
                cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
            except ZeroDivisionError:
                cos2SigmaM = 0

            # eq. 10
            C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))

            Lambda_prev = Lambda

            # eq. 11
            Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
            )

            if abs(Lambda - Lambda_prev) < self.tolerance:
                break
        else:
            raise ConvergenceFailure(
                f'Vincenty bearing from {start} to {end} did not converge within '
                f'{self.max_iterations} iterations (nearly antipodal points?)',
                iterations=self.max_iterations,
                start=start,
                end=end,
            )

        self.logger.debug('Vincenty bearing converged after %d iterations', iteration)

        # eq. 20
        alpha1 = math.atan2(
            cosU2 * math.sin(Lambda),
            cosU1 * sinU2 - sinU1 * cosU2 * math.cos(Lambda)
        )

        return (math.degrees(alpha1) + 360) % 360


class HaversineDistance(_EllipsoidBound, DistanceCalculator):
    """
    Great-circle distance on a sphere with the ellipsoid's mean radius. Roughly
    0.5% error, but never fails to converge.
    """

    def get_distance(self, start: Coordinate, end: Coordinate) -> float:
        radius = self._resolve_ellipsoid(start, end).mean_radius

        lon1, lat1 = math.radians(start.longitude), math.radians(start.latitude)
        lon2, lat2 = math.radians(end.longitude), math.radians(end.latitude)

        dlon = lon2 - lon1
        dlat = lat2 - lat1

        var1 = (math.sin(dlat / 2) ** 2 +
                math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
        return radius * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


class SphericalBearing(_EllipsoidBound, BearingCalculator):
    """Initial bearing along a great circle"""

    def calculate_bearing(self, start: Coordinate, end: Coordinate) -> float:
        self._resolve_ellipsoid(start, end)
        if start.is_coincident(end):
            raise DegenerateInputError(f'Bearing is undefined between coincident points {start}')

        lon1, lat1 = math.radians(start.longitude), math.radians(start.latitude)
        lon2, lat2 = math.radians(end.longitude), math.radians(end.latitude)

        dlon = lon2 - lon1

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

        return (math.degrees(math.atan2(y, x)) + 360) % 360


class _KarneyBase(_EllipsoidBound):

    def _inverse(self, start: Coordinate, end: Coordinate):
        """Solves the inverse problem via geographiclib (an optional dependency)"""
        from geographiclib.geodesic import Geodesic  # pylint: disable=import-outside-toplevel

        ellipsoid = self._resolve_ellipsoid(start, end)
        geod = Geodesic(ellipsoid.a, ellipsoid.f)

        return geod.Inverse(start.latitude, start.longitude, end.latitude, end.longitude)


class KarneyDistance(_KarneyBase, DistanceCalculator):
    """
    Distance using Karney's algorithm (via geographiclib). Robust against
    antipodal points. Requires geosimplify[karney].
    """

    def get_distance(self, start: Coordinate, end: Coordinate) -> float:
        return self._inverse(start, end)['s12']


class KarneyBearing(_KarneyBase, BearingCalculator):
    """
    Initial and final bearings using Karney's algorithm (via geographiclib).
    Requires geosimplify[karney].
    """

    def calculate_bearing(self, start: Coordinate, end: Coordinate) -> float:
        if start.is_coincident(end):
            raise DegenerateInputError(f'Bearing is undefined between coincident points {start}')

        # geographiclib returns azimuth in range [-180, 180]
        return (self._inverse(start, end)['azi1'] + 360) % 360

    def calculate_final_bearing(self, start: Coordinate, end: Coordinate) -> float:
        if start.is_coincident(end):
            raise DegenerateInputError(f'Bearing is undefined between coincident points {start}')

        return (self._inverse(start, end)['azi2'] + 360) % 360


def distance(start: Coordinate, end: Coordinate, ellipsoid: Optional[Ellipsoid] = None) -> float:
    """
    Vincenty distance between two coordinates, in meters.

    Args:
        start:
            The first Coordinate

        end:
            The second Coordinate

        ellipsoid:
            (Default None) Measure on this ellipsoid instead of the coordinates' own

    Returns:
        float

    Raises:
        ConvergenceFailure
    """
    return VincentyDistance(ellipsoid).get_distance(start, end)


def initial_bearing(start: Coordinate, end: Coordinate, ellipsoid: Optional[Ellipsoid] = None) -> float:
    """
    Ellipsoidal bearing from start towards end, in degrees [0, 360).

    Raises:
        DegenerateInputError, ConvergenceFailure
    """
    return EllipsoidalBearing(ellipsoid).calculate_bearing(start, end)


def final_bearing(start: Coordinate, end: Coordinate, ellipsoid: Optional[Ellipsoid] = None) -> float:
    """
    Ellipsoidal direction of travel on arrival at end, in degrees [0, 360).

    Raises:
        DegenerateInputError, ConvergenceFailure
    """
    return EllipsoidalBearing(ellipsoid).calculate_final_bearing(start, end)
