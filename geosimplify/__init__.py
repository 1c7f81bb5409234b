
import sys

from geosimplify._version import __version__  # noqa: F401
from geosimplify.utils.logging import LOGGER
from geosimplify.ellipsoid import Ellipsoid, WGS84
from geosimplify.coordinates import Coordinate
from geosimplify.exceptions import (
    ConvergenceFailure, DegenerateInputError, GeosimplifyError, InvalidArgument,
    InvariantViolation, UnknownEllipsoidError
)
from geosimplify.geodesic import (
    BearingCalculator, DistanceCalculator, EllipsoidalBearing, HaversineDistance,
    KarneyBearing, KarneyDistance, SphericalBearing, VincentyDistance,
    distance, final_bearing, initial_bearing
)
from geosimplify.structures import GeoLine, GeoLineString, GeoPolygon
from geosimplify.simplify import SimplifyBearingAndDistance, simplify
from geosimplify.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'geographiclib': 'geosimplify[karney]',
    }
)
if ConditionalPackageInterceptor not in sys.meta_path:
    sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'BearingCalculator',
    'ConvergenceFailure',
    'Coordinate',
    'DegenerateInputError',
    'DistanceCalculator',
    'Ellipsoid',
    'EllipsoidalBearing',
    'GeoLine',
    'GeoLineString',
    'GeoPolygon',
    'GeosimplifyError',
    'HaversineDistance',
    'InvalidArgument',
    'InvariantViolation',
    'KarneyBearing',
    'KarneyDistance',
    'LOGGER',
    'SimplifyBearingAndDistance',
    'SphericalBearing',
    'UnknownEllipsoidError',
    'VincentyDistance',
    'WGS84',
    'distance',
    'final_bearing',
    'initial_bearing',
    'simplify',
]
