"""Module for miscellaneous multi-use functions"""

__all__ = ['ensure_finite', 'round_half_up']

import math
from typing import Any

from geosimplify.exceptions import InvalidArgument


def ensure_finite(value: Any, name: str) -> float:
    """
    Converts a value to float, rejecting anything that isn't a finite number.

    Numeric strings (e.g. '52.5') are accepted. Booleans are not, even though
    python treats them as ints.

    Args:
        value:
            The value to be converted

        name:
            The argument name, used in the error message

    Returns:
        float

    Raises:
        InvalidArgument
    """
    if isinstance(value, bool):
        raise InvalidArgument(f'{name} must be numeric, not {value!r}')

    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f'{name} must be numeric, not {value!r}') from exc

    if not math.isfinite(out):
        raise InvalidArgument(f'{name} must be finite, not {out!r}')

    return out


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
