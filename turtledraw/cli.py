# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

from turtledraw.canvas import CanvasRenderer
from turtledraw.errors import TurtleError
from turtledraw.geometry import DEFAULT_MARGIN
from turtledraw.repl import Repl, format_state
from turtledraw.state import process
from turtledraw.svg import SvgRenderer
from turtledraw.tokens import read_tokens
from turtledraw.turtle import draw
import argparse, logging, sys

log = logging.getLogger(__name__)

def screen_area(p, args):
    if args.width is None and args.height is None: return None
    if args.width is None or args.height is None:  p.error('--width and --height must be given together')
    return args.width, args.height

def main(argv=None):
    p = argparse.ArgumentParser(prog='turtledraw', description='draw turtle command tokens'); add = p.add_argument
    add("--debug",        help='enable debug logs', action='store_true')
    add("--repl",   "-i", help='start the interactive REPL', action='store_true')
    add("--file",   "-f", help='read command tokens from a file', metavar='PATH')
    add("--width",        help='screen width',  type=float)
    add("--height",       help='screen height', type=float)
    add("--margin",       help='margin around the drawing (default: %(default)s)', type=float, default=DEFAULT_MARGIN)
    add("--svg",          help='write an SVG file instead of printing the drawing', metavar='PATH')
    add("--states",       help='print all turtle states', action='store_true')
    add("tokens",         help='command tokens, e.g.: fwd 50 left 90 fwd 50', nargs='*', metavar='TOKEN')
    args = p.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(level=level)
    area = screen_area(p, args)

    if args.repl:
        Repl(area, args.margin).start()
        return 0

    try:
        if args.file:
            with open(args.file, encoding='utf-8') as f: text = f.read()
        else:
            text = ' '.join(args.tokens)
        commands = read_tokens(text)

        if args.states:
            for i, state in enumerate(process(commands)): print(format_state(i, state))
        if args.svg:
            doc = draw(SvgRenderer(), commands, area, args.margin)
            with open(args.svg, 'w', encoding='utf-8') as f: f.write(doc)
            log.info('saved: %s', args.svg)
        elif not args.states:
            print(draw(CanvasRenderer(), commands, area, args.margin).frame())
    except (TurtleError, OSError) as err:
        log.error('%s', err)
        return 1
    return 0

if __name__ == '__main__': sys.exit(main())
