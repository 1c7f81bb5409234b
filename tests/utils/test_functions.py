import math

import pytest

from geosimplify.exceptions import InvalidArgument
from geosimplify.utils.functions import *


def test_ensure_finite():
    assert ensure_finite(1, 'x') == 1.
    assert ensure_finite('1.5', 'x') == 1.5
    assert isinstance(ensure_finite(1, 'x'), float)

    for value in (None, 'foo', True, math.nan, math.inf, -math.inf, [1.]):
        with pytest.raises(InvalidArgument, match='x must be'):
            ensure_finite(value, 'x')


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6
