# -*- coding: utf-8 -*-

# (C) 2014- by Adam Tauber, <asciimoo@gmail.com>
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

"""
Terminal renderer drawing turtle states with unicode braille characters.

http://www.alanwood.net/unicode/braille_patterns.html

dots:
   ,___,
   |1 4|
   |2 5|
   |3 6|
   |7 8|
   `````
"""

import logging, math, os
from collections import defaultdict

from turtledraw.geometry import transform_point

log = logging.getLogger(__name__)

pixel_map = ((0x01, 0x08),
             (0x02, 0x10),
             (0x04, 0x20),
             (0x40, 0x80))

# braille unicode characters starts at 0x2800
braille_char_offset = 0x2800

def iround(coord): return int(round(coord))

def colrow(x, y):
    """Convert x, y to column, row in the braille matrix"""
    return iround(x) // 2, iround(y) // 4


class Canvas(object):
    """Canvas implements the pixel surface."""

    def __init__(self, line_ending=os.linesep, bounds=None):
        self.clear()
        self.line_ending = line_ending
        self.bounds = bounds  # (min_x, min_y, max_x, max_y) used by frame()


    def clear(self):
        """Remove all pixels from the :class:`Canvas` object."""
        self.chars = defaultdict(lambda: defaultdict(int))


    def _dot(self, x, y):
        x, y = iround(x), iround(y)
        col, row = colrow(x, y)
        return row, col, pixel_map[y % 4][x % 2]


    def set(self, x, y):
        """Set a pixel of the :class:`Canvas` object.

        :param x: x coordinate of the pixel
        :param y: y coordinate of the pixel
        """
        row, col, dot = self._dot(x, y)
        self.chars[row][col] |= dot


    def unset(self, x, y):
        """Unset a pixel of the :class:`Canvas` object.

        :param x: x coordinate of the pixel
        :param y: y coordinate of the pixel
        """
        row, col, dot = self._dot(x, y)
        if row not in self.chars or col not in self.chars[row]: return
        self.chars[row][col] &= ~dot
        if self.chars[row][col] == 0: del self.chars[row][col]
        if not self.chars[row]:       del self.chars[row]


    def toggle(self, x, y):
        """Toggle a pixel of the :class:`Canvas` object."""
        if self.get(x, y): self.unset(x, y)
        else:              self.set(x, y)


    def get(self, x, y):
        """Get the state of a pixel. Returns bool."""
        row, col, dot = self._dot(x, y)
        return bool(self.chars.get(row, {}).get(col, 0) & dot)


    def rows(self, min_x=None, min_y=None, max_x=None, max_y=None):
        """Yields the current :class:`Canvas` object lines.

        Without arguments the canvas `bounds` are used, if set, otherwise the
        lines are cropped to the set pixels.

        :param min_x: (optional) minimum x coordinate of the canvas
        :param min_y: (optional) minimum y coordinate of the canvas
        :param max_x: (optional) maximum x coordinate of the canvas
        :param max_y: (optional) maximum y coordinate of the canvas
        """
        if (min_x, min_y, max_x, max_y) == (None, None, None, None) and self.bounds is not None:
            min_x, min_y, max_x, max_y = self.bounds

        if not self.chars and None in (min_x, min_y, max_x, max_y): return

        minrow =  min_y      // 4 if min_y is not None else min(self.chars)
        maxrow = (max_y - 1) // 4 if max_y is not None else max(self.chars)
        mincol =  min_x      // 2 if min_x is not None else min(min(cols) for cols in self.chars.values())

        for rownum in range(minrow, maxrow + 1):
            cols = self.chars.get(rownum, {})
            if   max_x is not None: maxcol = (max_x - 1) // 2
            elif cols:              maxcol = max(cols)
            else:                   yield ''; continue

            yield ''.join(chr(braille_char_offset + cols.get(x, 0)) for x in range(mincol, maxcol + 1))


    def frame(self, min_x=None, min_y=None, max_x=None, max_y=None):
        """String representation of the current :class:`Canvas` object pixels.

        :param min_x: (optional) minimum x coordinate of the canvas
        :param min_y: (optional) minimum y coordinate of the canvas
        :param max_x: (optional) maximum x coordinate of the canvas
        :param max_y: (optional) maximum y coordinate of the canvas
        """
        return self.line_ending.join(self.rows(min_x, min_y, max_x, max_y))


def line(x1, y1, x2, y2):
    """Yields the pixel coordinates of the line between (x1, y1), (x2, y2)

    :param x1: x coordinate of the startpoint
    :param y1: y coordinate of the startpoint
    :param x2: x coordinate of the endpoint
    :param y2: y coordinate of the endpoint
    """
    x1, y1, x2, y2 = iround(x1), iround(y1), iround(x2), iround(y2)

    xdiff = abs(x2 - x1)
    ydiff = abs(y2 - y1)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1

    r = max(xdiff, ydiff)
    if r == 0: yield (x1, y1); return

    dx = xdiff / float(r) * xdir
    dy = ydiff / float(r) * ydir

    for i in range(r + 1):
        yield (x1 + i * dx, y1 + i * dy)


def segments(states):
    """Yields the (start, end) coords of all visible segments.

    Segments leading into a pen-up state or into a restore point are skipped.
    """
    for prev, curr in zip(states, states[1:]):
        if curr.move or curr.restore_point: continue
        if prev.coords == curr.coords:      continue
        yield prev.coords, curr.coords


class CanvasRenderer(object):
    """Renders turtle states onto a braille :class:`Canvas` framed to the screen area.

    Usage Example:

        frame = draw(CanvasRenderer(), ['fwd', 20, 'left', 90, 'fwd', 20], (40, 40)).frame()

    """
    def __init__(self, canvas=None):
        self.canvas = Canvas() if canvas is None else canvas

    def __call__(self, states, screen_area, bounds, matrix):
        width, height = screen_area
        self.canvas.bounds = (0, 0, int(math.ceil(width)), int(math.ceil(height)))
        n = 0
        for start, end in segments(states):
            x1, y1 = transform_point(matrix, start)
            x2, y2 = transform_point(matrix, end)
            for x, y in line(x1, y1, x2, y2): self.canvas.set(x, y)
            n += 1
        log.debug('plotted %s segments on %s', n, screen_area)
        return self.canvas
