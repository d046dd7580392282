# -*- coding: utf-8 -*-

# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

"""
Turtle states and the reducer that evolves them.

A command stream is a (possibly nested) sequence of tokens, e.g.

    ['color', 'red', 'fwd', 50, 'left', 90, 'fwd', 50]

Every recognized tag together with the token that follows it is applied to
the current state. `process` returns all states, starting with the initial
one, so a renderer can replay the drawing segment by segment.
"""

import enum, itertools, logging, math, numbers
from collections import namedtuple
from collections.abc import Iterable
from dataclasses import dataclass, replace
from functools import partial
from operator import add, sub

from turtledraw.errors import CommandError

log = logging.getLogger(__name__)

COLORS = ('red', 'green', 'blue', 'yellow', 'cyan', 'magenta', 'orange', 'black', '#663300', '#68FF33')

DEFAULT_COLOR   = COLORS[0]
DEFAULT_HEADING = 90
ORIGIN          = (0.0, 0.0)
PRECISION       = 5


class Command(enum.Enum):
    COLOR       = 'color'
    FILL        = 'fill'
    COLOR_INDEX = 'color-index'
    LEFT        = 'left'
    RIGHT       = 'right'
    FWD         = 'fwd'
    PEN         = 'pen'
    SAVE        = 'save'
    RESTORE     = 'restore'
    ORIGIN      = 'origin'

    @classmethod
    def lookup(cls, token):
        """Returns the :class:`Command` named by `token` or None if the token is not a tag."""
        if isinstance(token, cls): return token
        if not isinstance(token, str): return None
        try:               return cls(token)
        except ValueError: return None


Pose   = namedtuple('Pose', 'coords heading')
Motion = namedtuple('Motion', 'coords heading stack move')


@dataclass(frozen=True)
class TurtleState:
    """Snapshot of the turtle after a command.

    `move` is sticky: it stays set until the pen is put down again.
    `restore_point` only marks the state produced by `restore` or `origin`.
    """
    coords:        tuple = ORIGIN
    heading:       float = DEFAULT_HEADING
    color:         object = DEFAULT_COLOR
    fill:          object = None
    stack:         tuple = ()
    move:          bool = False
    restore_point: bool = False

    @property
    def motion(self):
        """The only part of the state a command handler gets to see."""
        return Motion(self.coords, self.heading, self.stack, self.move)

    @property
    def pose(self): return Pose(self.coords, self.heading)


INITIAL_STATE = TurtleState()


def rounded(value): return round(value, PRECISION)

def normalize(heading):
    heading = heading % 360
    # tiny negative headings wrap to exactly 360.0
    return 0 if heading == 360 else heading

def number(command, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise CommandError(command.value, value)
    return value


# Handlers take the narrowed Motion view and the argument token and return
# only the fields they change. Fields they do not return keep their values.

def update_color(motion, color): return dict(color=color)

def update_fill(motion, fill): return dict(fill=fill)

def color_index(motion, index):
    if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(COLORS):
        return dict(color=COLORS[index])
    log.debug('ignoring unknown color-index: %r', index)
    return {}

def turn(op, command, motion, angle):
    """Alters the heading by `angle` degrees, `op` is either `add` (left) or `sub` (right)."""
    return dict(heading=normalize(op(motion.heading, number(command, angle))))

def move_forward(motion, dist):
    """Moves `dist` units along the current heading."""
    dist = number(Command.FWD, dist)
    rad = math.radians(motion.heading)
    x, y = motion.coords
    return dict(coords=(rounded(x + dist * math.cos(rad)),
                        rounded(y + dist * math.sin(rad))))

def pen_ops(motion, pen): return dict(move=(pen == 'up'))

def push_state(motion, _):
    return dict(stack=motion.stack + (Pose(motion.coords, motion.heading),))

def pop_state(motion, _):
    if not motion.stack:
        log.debug('restore on empty stack')
        return {}
    coords, heading = motion.stack[-1]
    return dict(coords=coords, heading=heading, stack=motion.stack[:-1], restore_point=True)

def goto_origin(motion, _):
    return dict(coords=ORIGIN, heading=DEFAULT_HEADING, stack=(), restore_point=True)


HANDLERS = {
    Command.COLOR:       update_color,
    Command.FILL:        update_fill,
    Command.COLOR_INDEX: color_index,
    Command.LEFT:        partial(turn, add, Command.LEFT),
    Command.RIGHT:       partial(turn, sub, Command.RIGHT),
    Command.FWD:         move_forward,
    Command.PEN:         pen_ops,
    Command.SAVE:        push_state,
    Command.RESTORE:     pop_state,
    Command.ORIGIN:      goto_origin,
}

assert set(HANDLERS) == set(Command), 'missing handlers: {}'.format(set(Command) - set(HANDLERS))


def flatten(tokens):
    """Yields the leaf tokens of arbitrarily nested token sequences."""
    for token in tokens:
        if isinstance(token, (str, bytes)) or not isinstance(token, Iterable): yield token
        else:                                                                  yield from flatten(token)


def command_pairs(tokens):
    """Yields (command, argument) for every token that is a command tag.

    The argument is the next token, or None if there is no next token or if
    it is a command tag itself.
    """
    tokens = list(flatten(tokens))
    for head, arg in zip(tokens, tokens[1:] + [None]):
        cmd = Command.lookup(head)
        if cmd is None: continue
        if Command.lookup(arg) is not None: arg = None
        yield cmd, arg


def next_state(state, pair):
    """Evolves `state` by one (command, argument) pair."""
    cmd, arg = pair
    changes = dict(restore_point=False)
    changes.update(HANDLERS[cmd](state.motion, arg))
    return replace(state, **changes)


def process(commands, initial=INITIAL_STATE):
    """Reduces a command stream to the list of all states, `initial` first.

    :param commands: nested sequence of command tags and arguments
    :param initial: (optional) :class:`TurtleState` to start from
    """
    states = list(itertools.accumulate(command_pairs(commands), next_state, initial=initial))
    log.debug('processed %s commands, final state: %s', len(states) - 1, states[-1])
    return states
