# PixelMath - Toolkit-independent pixel snapping and scaling math
#
# Rounding rules and coordinate scaling used by Surface before each
# draw call. Kept free of Qt so the numbers can be checked without
# a paint device.

import math

# Full turn in radians (circle sweep)
TAU = 2 * math.pi

DEFAULT_PRECISION = 2


def round_half_up(value):
    """Round to the nearest integer, halves going up.

    This is floor(value + 0.5), so it is not symmetric around zero:
    -0.5 becomes 0 and -0.6 becomes -1.

    Args:
        value: Any finite number.

    Returns:
        int
    """
    return int(math.floor(value + 0.5))


def round_float(value, precision=DEFAULT_PRECISION):
    """Round to `precision` decimal digits with round_half_up.

    Floating point representation is not corrected for, e.g.
    round_float(1.005) is 1.0 because 1.005 * 100 is 100.49999...

    Args:
        value: Any finite number.
        precision: Number of decimal digits to keep.

    Returns:
        float
    """
    coef = math.pow(10, precision)
    return round_half_up(value * coef) / coef


def scale_point(point, scale):
    """Return (x * scale, y * scale) for a point-like pair."""
    return (point[0] * scale, point[1] * scale)


def scale_points(points, scale):
    """Scale every point of a polyline in place.

    Each item of `points` is replaced by a new (x, y) tuple, so the
    sequence itself must be mutable (a list, not a tuple).

    Args:
        points: Mutable sequence of (x, y) pairs.
        scale: Multiplier applied to both coordinates.

    Returns:
        The same `points` object.
    """
    for i in range(len(points) - 1, -1, -1):
        points[i] = scale_point(points[i], scale)
    return points


def rotation_center(x, y, width, height):
    """Center of the rectangle (x, y, width, height).

    Used as the pivot when blitting an image rotated about itself.
    """
    return x + width / 2, y + height / 2


def centered_origin(width, height):
    """Top-left offset that centers a width x height box on (0, 0)."""
    return -width / 2, -height / 2
