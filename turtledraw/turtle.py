# -*- coding: utf-8 -*-

# (C) 2014- by Adam Tauber, <asciimoo@gmail.com>
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

import logging

from turtledraw.geometry import DEFAULT_MARGIN, bounding_box, calc_matrix_transform, default_screen_area, extend_bounds
from turtledraw.state import Command, process

log = logging.getLogger(__name__)


def draw(renderer, commands, screen_area=None, margin=DEFAULT_MARGIN):
    """Runs the commands and hands the result to the renderer.

    The renderer is called once as `renderer(states, screen_area, bounds, matrix)`
    and its return value is returned.

    :param renderer: Callable. Draws the states, e.g. :class:`turtledraw.canvas.CanvasRenderer`
    :param commands: nested sequence of command tags and arguments
    :param screen_area: (optional) (width, height), defaults to the size of the drawing
    :param margin: (optional) units added around the drawing
    """
    states = process(commands)
    bounds = extend_bounds(bounding_box(s.coords for s in states), margin)
    if screen_area is None: screen_area = default_screen_area(bounds)
    matrix = calc_matrix_transform(screen_area, bounds)
    log.debug('rendering %s states with %s', len(states), renderer)
    return renderer(states, screen_area, bounds, matrix)


class Turtle(object):
    """Turtle graphics interface
    http://en.wikipedia.org/wiki/Turtle_graphics

    Records commands instead of drawing them. The states are computed from
    the recorded commands on demand.
    """

    def __init__(self, commands=()):
        self.commands = list(commands)


    def _add(self, cmd, *args):
        self.commands.append(cmd.value)
        self.commands.extend(args)
        return self


    @property
    def states(self):
        """All states of the turtle, starting with the initial state."""
        return process(self.commands)


    @property
    def state(self):
        """The current state of the turtle."""
        return self.states[-1]


    def up(self):
        """Pull the pen up."""
        return self._add(Command.PEN, 'up')


    def down(self):
        """Push the pen down."""
        return self._add(Command.PEN, 'down')


    def forward(self, step):
        """Move the turtle forward.

        :param step: Number. Distance to move forward.
        """
        return self._add(Command.FWD, step)


    def back(self, step):
        """Move the turtle backwards.

        :param step: Number. Distance to move backwards.
        """
        return self.forward(-step)


    def left(self, angle):
        """Rotate the turtle counter-clockwise.

        :param angle: Number. Rotation angle in degrees.
        """
        return self._add(Command.LEFT, angle)


    def right(self, angle):
        """Rotate the turtle clockwise.

        :param angle: Number. Rotation angle in degrees.
        """
        return self._add(Command.RIGHT, angle)


    def color(self, color):       return self._add(Command.COLOR, color)
    def fill(self, color):        return self._add(Command.FILL, color)
    def color_index(self, index): return self._add(Command.COLOR_INDEX, index)
    def save(self):               return self._add(Command.SAVE)
    def restore(self):            return self._add(Command.RESTORE)
    def origin(self):             return self._add(Command.ORIGIN)


    def draw(self, renderer, screen_area=None, margin=DEFAULT_MARGIN):
        """Draw the recorded commands, see :func:`draw`."""
        return draw(renderer, self.commands, screen_area, margin)


    # 2-letter aliases
    pu = up
    pd = down
    fd = forward
    bk = back
    rt = right
    lt = left
