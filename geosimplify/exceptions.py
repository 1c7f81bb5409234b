"""
Exception hierarchy for geosimplify

Every error is raised where it is detected; nothing in this package retries
or silently approximates.
"""

__all__ = [
    'ConvergenceFailure', 'DegenerateInputError', 'GeosimplifyError',
    'InvalidArgument', 'InvariantViolation', 'UnknownEllipsoidError',
]

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from geosimplify.coordinates import Coordinate


class GeosimplifyError(Exception):
    """Base class for all geosimplify errors"""


class InvalidArgument(GeosimplifyError, ValueError):
    """A caller-supplied value is out of range, non-finite, or of the wrong type"""


class UnknownEllipsoidError(InvalidArgument, KeyError):
    """No ellipsoid preset is registered under the requested name"""

    def __str__(self):
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ''


class ConvergenceFailure(GeosimplifyError, ArithmeticError):
    """
    Vincenty's inverse formula did not converge within the iteration cap.

    This almost always means the two points are (nearly) antipodal. Callers
    may perturb the input or switch to a more robust calculator.
    """

    def __init__(
        self,
        msg: str,
        iterations: int = 0,
        start: Optional['Coordinate'] = None,
        end: Optional['Coordinate'] = None,
    ):
        super().__init__(msg)
        self.iterations = iterations
        self.start = start
        self.end = end


class DegenerateInputError(GeosimplifyError, ValueError):
    """A bearing was requested between coincident points"""


class InvariantViolation(GeosimplifyError, AssertionError):
    """An internal consistency check failed; indicates a bug, never retried"""
