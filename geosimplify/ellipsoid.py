"""
Reference ellipsoids for geodesic calculations
"""

__all__ = ['Ellipsoid', 'ELLIPSOID_PRESETS', 'WGS84']

import math
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from geosimplify._const import ELLIPSOID_RTOL, WGS84_A, WGS84_B, WGS84_INVERSE_F
from geosimplify.exceptions import InvalidArgument, UnknownEllipsoidError
from geosimplify.utils.functions import ensure_finite


# name: (semi-major axis, inverse flattening)
ELLIPSOID_PRESETS: Dict[str, Tuple[float, float]] = {
    'WGS-84': (6378137.0, 298.257223563),
    'GRS-80': (6378137.0, 298.257222101),
    'WGS-72': (6378135.0, 298.26),
    'Airy-1830': (6377563.396, 299.3249646),
    'Bessel-1841': (6377397.155, 299.1528128),
    'Clarke-1866': (6378206.4, 294.978698214),
    'International-1924': (6378388.0, 297.0),
    'Krassovsky-1940': (6378245.0, 298.3),
}


def _normalize_name(name: str) -> str:
    return re.sub(r'[\s_\-]', '', name).lower()


_PRESET_LOOKUP = {_normalize_name(k): k for k in ELLIPSOID_PRESETS}


def _restore_ellipsoid(cls, name: str, a: float, b: float, f: float) -> 'Ellipsoid':
    """Unpickles an Ellipsoid without re-deriving (and possibly re-rounding) f"""
    out = object.__new__(cls)
    for attr, value in (('_name', name), ('_a', a), ('_b', b), ('_f', f)):
        object.__setattr__(out, attr, value)

    return out


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, described by its semi-major axis ``a`` and
    either its semi-minor axis ``b``, its inverse flattening ``1/f``, or both.

    When both are supplied they must agree: b must match a * (1 - f) to within a relative
    tolerance of 1e-9. The supplied values are stored as-is, so published parameter sets
    (which round b) are reproduced exactly.

    A sphere (b == a, flattening 0) is permitted; inverse_flattening is then infinite.

    Args:
        name:
            A human-readable label, e.g. 'WGS-84'

        a:
            The semi-major (equatorial) axis, in meters

        b:
            The semi-minor (polar) axis, in meters

        inverse_flattening:
            1/f

    """

    __slots__ = ('_name', '_a', '_b', '_f')

    def __init__(
        self,
        name: str,
        a: float,
        b: Optional[float] = None,
        inverse_flattening: Optional[float] = None,
    ):
        a = ensure_finite(a, 'a')
        if a <= 0:
            raise InvalidArgument(f'Semi-major axis must be positive, not {a}')

        if b is None and inverse_flattening is None:
            raise InvalidArgument('Either b or inverse_flattening must be provided.')

        f = None
        if inverse_flattening is not None:
            try:
                inverse_flattening = float(inverse_flattening)
            except (TypeError, ValueError) as exc:
                raise InvalidArgument(
                    f'Inverse flattening must be numeric, not {inverse_flattening!r}'
                ) from exc

            if math.isnan(inverse_flattening) or inverse_flattening <= 1:
                raise InvalidArgument(
                    f'Inverse flattening must be greater than 1, not {inverse_flattening}'
                )
            f = 1 / inverse_flattening  # inf -> 0.0, a sphere

        if b is None:
            b = a * (1 - f)
        else:
            b = ensure_finite(b, 'b')
            if not 0 < b <= a:
                raise InvalidArgument(
                    f'Semi-minor axis must satisfy 0 < b <= a, got a={a}, b={b}'
                )

        if f is None:
            f = (a - b) / a
        elif not math.isclose(b, a * (1 - f), rel_tol=ELLIPSOID_RTOL):
            raise InvalidArgument(
                f'Inconsistent ellipsoid parameters: b = {b}, but a * (1 - f) = {a * (1 - f)}'
            )

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_b', b)
        object.__setattr__(self, '_f', f)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ellipsoid):
            return False

        return self.parameters == other.parameters

    def __hash__(self) -> int:
        return hash(self.parameters)

    def __repr__(self) -> str:
        return f'<Ellipsoid {self.name} (a={self.a}, b={self.b}, 1/f={self.inverse_flattening})>'

    def __reduce__(self):
        return _restore_ellipsoid, (self.__class__, self._name, self._a, self._b, self._f)

    @property
    def name(self) -> str:
        return self._name

    @property
    def a(self) -> float:
        """Semi-major axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor axis, in meters"""
        return self._b

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def inverse_flattening(self) -> float:
        return math.inf if self._f == 0 else 1 / self._f

    @property
    def mean_radius(self) -> float:
        """The IUGG mean radius, (2a + b) / 3"""
        return (2 * self._a + self._b) / 3

    @property
    def parameters(self) -> Tuple[float, float, float]:
        """The defining (a, b, f) triple; two ellipsoids are equal when these match"""
        return self._a, self._b, self._f

    @property
    def second_eccentricity_squared(self) -> float:
        """(a^2 - b^2) / b^2, the factor used to derive u^2 in Vincenty's formulae"""
        return (self._a ** 2 - self._b ** 2) / self._b ** 2

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from a mapping of the form

            {'name': 'WGS-84', 'a': 6378137.0, 'b': 6356752.3142, 'f': 298.257223563}

        Note that 'f' holds the *inverse* flattening, as it is commonly published.
        Either 'b' or 'f' may be omitted.
        """
        if 'a' not in config:
            raise InvalidArgument('Ellipsoid config requires a semi-major axis "a".')

        return cls(
            config.get('name', 'custom'),
            config['a'],
            b=config.get('b'),
            inverse_flattening=config.get('f'),
        )

    @classmethod
    def from_name(cls, name: str) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from the table of named presets. Names are matched
        ignoring case, spaces, hyphens and underscores, so 'wgs84' finds 'WGS-84'.

        Raises:
            UnknownEllipsoidError
        """
        key = _PRESET_LOOKUP.get(_normalize_name(str(name)))
        if key is None:
            raise UnknownEllipsoidError(
                f'Unknown ellipsoid {name!r}. Options: {list(ELLIPSOID_PRESETS.keys())}'
            )

        if key == 'WGS-84':
            return WGS84

        a, inverse_f = ELLIPSOID_PRESETS[key]
        return cls(key, a, inverse_flattening=inverse_f)


# The default reference ellipsoid. Uses the published polar radius rather than the
# one derived from 1/f, which differs in the 5th decimal.
WGS84 = Ellipsoid('WGS-84', WGS84_A, b=WGS84_B, inverse_flattening=WGS84_INVERSE_F)
