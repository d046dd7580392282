# -*- coding: utf-8 -*-

# (C) 2014- by Adam Tauber, <asciimoo@gmail.com>
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

from turtledraw.errors import TurtleError, CommandError, GeometryError, TokenError  # noqa: F401
from turtledraw.state import COLORS, INITIAL_STATE, Command, Pose, TurtleState, process  # noqa: F401
from turtledraw.geometry import DEFAULT_MARGIN, bounding_box, calc_matrix_transform, extend_bounds  # noqa: F401
from turtledraw.turtle import Turtle, draw  # noqa: F401
