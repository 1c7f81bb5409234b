from tests.functions import hawaii, right_angle, square_ring, straight_line  # noqa: F401
