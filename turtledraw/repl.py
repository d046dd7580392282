# -*- coding: utf-8 -*-

# (C) 2018 Uwe Jugel, @ubunatic
# License: GNU AGPLv3+ (see LICENSE file or http://www.gnu.org/licenses)

"""
This module implements a REPL to feed command tokens to the turtle and
watch the drawing grow on the console.

To start this module, run: `turtledraw --repl` or `python -m turtledraw -i`.
"""

import re, logging

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.lexers import PygmentsLexer

from pygments.lexer import RegexLexer, words
from pygments.token import Text, Keyword, Comment, Literal, Number, Punctuation

from turtledraw.canvas import CanvasRenderer
from turtledraw.errors import StopRepl, TurtleError
from turtledraw.geometry import DEFAULT_MARGIN
from turtledraw.state import Command, process
from turtledraw.tokens import format_tokens, read_tokens
from turtledraw.turtle import draw

log = logging.getLogger(__name__)

usage = """
Type 'q' or 'quit' to leave. Every line you type is a list of command tokens
that is appended to the drawing:

    color red fwd 50 left 90 fwd 50

Commands are:

    fwd DIST          move forward
    left DEG          turn counter-clockwise
    right DEG         turn clockwise
    pen up|down       stop or start drawing
    color NAME        set the pen color
    fill NAME         set the fill color
    color-index N     set the pen color from the palette (0-9)
    save              remember position and heading
    restore           go back to the last saved position and heading
    origin            go back to the start

Brackets group tokens, e.g. `save [left 45 fwd 20] restore`, and ';' starts a comment.

Other commands are:

    help    # show this help
    print   # print the drawing
    states  # print all turtle states
    undo    # remove the last line from the drawing
    reset   # start a new drawing
    quit    # exit the REPL
"""

def format_state(i, state):
    """format_state formats a turtle state as a single line"""
    x, y = state.coords
    flags = ' '.join(f for f, on in (('move', state.move), ('restore-point', state.restore_point)) if on)
    return '{:4d}: ({:g}, {:g}) heading={:g} color={} fill={} stack={} {}'.format(
        i, x, y, state.heading, state.color, state.fill, len(state.stack), flags).rstrip()


class TokenLexer(RegexLexer):
    """TokenLexer is a simple RegexLexer,
    required for pygments syntax highlighting."""
    name = 'turtledraw'
    aliases = ['turtledraw', 'tdraw']
    filenames = ['*.tdraw']
    flags = re.IGNORECASE

    tokens = dict(root=[
        (r'\s+',                                                       Text),
        (r';.*',                                                       Comment),
        (r'[\[\]]',                                                    Punctuation),
        (words([c.value for c in Command], suffix=r'(?![^\s\[\];])'), Keyword),
        (r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?(?![^\s\[\];])',      Number),
        (r'[^\s\[\];]+',                                               Literal),
    ])


class ConsolePrinter(object):
    """ConsolePrinter is a Mixin Class for printing the REPL output to the console."""
    def print_text(tur, *args):
        """print_text is the text output function of the REPL. It uses Python's print function."""
        print(*args)

    def print_frame(tur):
        """print_frame prints the current drawing"""
        tur.print_text(tur.frame())

    def print_states(tur):
        """print_states prints all states of the current drawing"""
        for i, state in enumerate(process(tur.program)):
            tur.print_text(format_state(i, state))


class Repl(ConsolePrinter):
    """Repl is an interactive prompt that reads command tokens line by line,
    appends them to the current program and prints the resulting drawing.
    Usage Example:

        tur = Repl(screen_area=(80, 80))
        tur.run('fwd 20 left 90 fwd 20')
        tur.print_states()

    """
    def __init__(tur, screen_area=None, margin=DEFAULT_MARGIN):
        tur.screen_area = screen_area
        tur.margin = margin
        tur.program = []
        tur.history = InMemoryHistory()
        tur.lino = 1
        tur.meta = {}
        for k, v in [('help',   tur.help),
                     ('print',  tur.print_frame),
                     ('states', tur.print_states),
                     ('undo',   tur.undo),
                     ('reset',  tur.reset),
                     ('quit',   tur.quit),
                     ('q',      tur.quit)]:
            tur.meta[k] = v

    def frame(tur):
        return draw(CanvasRenderer(), tur.program, tur.screen_area, tur.margin).frame()

    def run(tur, text):
        """run handles one line of input, either a REPL command or command tokens.
        Lines with invalid command arguments are rejected and do not become part of the program."""
        word = text.strip().lower()
        if word in tur.meta:
            log.debug('running: %s', word)
            return tur.meta[word]()

        tokens = read_tokens(text)
        if not tokens: return
        process(tur.program + [tokens])
        tur.program.append(tokens)
        log.debug('program: %s', format_tokens(tur.program))
        tur.print_frame()

    def start(tur):
        """start the repl loop"""
        log.debug("starting REPL")
        tur.help()
        while True:
            try: tur.repl(); tur.lino += 1
            except (StopRepl, EOFError): return True
            except KeyboardInterrupt:    tur.print_text("Type 'q' or 'quit' to leave.")
            except TurtleError as err:   tur.print_text(err)

    def repl(tur):
        """run the repl once: first read the input, then execute it"""
        completer = WordCompleter([c.value for c in Command] + list(tur.meta), ignore_case=True)
        text = prompt('turtledraw [{}]: '.format(tur.lino),
                      history=tur.history,
                      lexer=PygmentsLexer(TokenLexer),
                      completer=completer)
        tur.run(text)

    def undo(tur):
        if tur.program: tur.program.pop()
        tur.print_frame()

    def reset(tur): tur.program = []

    def quit(tur): raise StopRepl("quit")

    def help(tur): tur.print_text(usage)
