# -*- coding: utf-8 -*-

# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

"""
Bounding boxes and the affine transform that fits a drawing onto a screen.

Matrices are 6-tuples `(a, b, c, d, e, f)` in the SVG/canvas convention:

    x' = a*x + c*y + e
    y' = b*x + d*y + f
"""

import logging, math

from turtledraw.errors import GeometryError
from turtledraw.state import rounded

log = logging.getLogger(__name__)

DEFAULT_MARGIN = 5


def bounding_box(coords):
    """Calculates the smallest and largest (x, y) points.

    :param coords: iterable of (x, y) pairs
    """
    coords = list(coords)
    if not coords: raise GeometryError('cannot calculate the bounding box of no coordinates')
    xs = [x for x, _ in coords]
    ys = [y for _, y in coords]
    return (min(xs), min(ys)), (max(xs), max(ys))


def extend_bounds(bounds, margin=DEFAULT_MARGIN):
    """Grows the bounds by `margin` units on all four sides."""
    (min_x, min_y), (max_x, max_y) = bounds
    return (min_x - margin, min_y - margin), (max_x + margin, max_y + margin)


def default_screen_area(bounds):
    """The screen size that shows the bounds unscaled."""
    (min_x, min_y), (max_x, max_y) = bounds
    return max_x - min_x, max_y - min_y


def axis_scale(size, span):
    # a flat axis never limits the scale
    return size / span if span else math.inf


def calc_matrix_transform(screen_area, bounds):
    """Calculates an affine transform matrix which will scale a drawing
    constrained by the min/max bounds to the given screen size.

    The drawing is flipped, so that (0, 0) is represented at (or near) the
    lower edge and not the upper edge of the screen. If both axes of the
    bounds are flat the drawing is not scaled at all.

    :param screen_area: (width, height) of the target screen
    :param bounds: ((min_x, min_y), (max_x, max_y)) of the drawing
    """
    screen_x, screen_y = screen_area
    (min_x, min_y), (max_x, max_y) = bounds
    scale = min(axis_scale(screen_x, max_x - min_x),
                axis_scale(screen_y, max_y - min_y))
    if math.isinf(scale): scale = 1.0
    matrix = tuple(rounded(v) for v in (scale, 0, 0, -scale, scale * -min_x, scale * max_y))
    log.debug('transform for screen %s and bounds %s: %s', screen_area, bounds, matrix)
    return matrix


def transform_point(matrix, point):
    """Maps a drawing-space point to screen space."""
    a, b, c, d, e, f = matrix
    x, y = point
    return a * x + c * y + e, b * x + d * y + f
