# -*- coding: utf-8 -*-

# License: GNU AGPLv3+ (see LICENSE file or http://www.gnu.org/licenses)

class TurtleError(Exception): pass

class CommandError(TurtleError, TypeError):
    """A command received an argument it cannot work with, e.g. `fwd up`."""
    def __init__(err, command, value):
        super().__init__(command, value)
        err.command = command
        err.value = value

    def __str__(err): return '{} expects a number, got {!r}'.format(err.command, err.value)

class GeometryError(TurtleError, ValueError): pass
class TokenError(TurtleError, ValueError):    pass

class StopRepl(Exception): pass
