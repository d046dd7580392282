# -*- coding: utf-8 -*-

# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

"""SVG renderer: one <polyline> per unbroken, single-styled run of segments."""

import html, logging

log = logging.getLogger(__name__)


def fmt(x, precision):
    s = '{:.{}f}'.format(x, precision)
    if '.' in s: s = s.rstrip('0').rstrip('.')
    return '0' if s in ('', '-0') else s

def attr(value): return html.escape(str(value), quote=True)


def polylines(states):
    """Yields ((color, fill), points) for every run of connected segments.

    A run ends at a pen-up state, at a restore point, or where the color or
    fill changes. States that do not move the turtle never end a run.
    """
    run, style = [], None
    for prev, curr in zip(states, states[1:]):
        if prev.coords == curr.coords: continue
        key = (curr.color, curr.fill)
        if curr.move or curr.restore_point:
            if run: yield style, run
            run, style = [], None
        elif run and key == style and run[-1] == prev.coords:
            run.append(curr.coords)
        else:
            if run: yield style, run
            run, style = [prev.coords, curr.coords], key
    if run: yield style, run


class SvgRenderer(object):
    """Renders turtle states to an SVG document string.

    The polylines keep drawing-space coordinates; the transform matrix is set
    on the enclosing group and strokes do not scale with it.

    :param precision: decimals written for coordinates
    :param stroke_width: stroke width in screen units
    :param background: (optional) background color of the whole screen
    """
    def __init__(self, precision=2, stroke_width=1, background=None):
        self.precision = precision
        self.stroke_width = stroke_width
        self.background = background

    def __call__(self, states, screen_area, bounds, matrix):
        p = self.precision
        width, height = screen_area
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{0}" height="{1}" viewBox="0 0 {0} {1}">'
            .format(fmt(width, p), fmt(height, p)),
        ]
        if self.background is not None:
            lines.append('  <rect x="0" y="0" width="{}" height="{}" fill="{}" />'
                         .format(fmt(width, p), fmt(height, p), attr(self.background)))

        lines.append('  <g transform="matrix({})">'.format(' '.join(fmt(v, 5) for v in matrix)))
        n = 0
        for (color, fill), points in polylines(states):
            pts = ' '.join('{},{}'.format(fmt(x, p), fmt(y, p)) for x, y in points)
            lines.append('    <polyline points="{}" stroke="{}" fill="{}" stroke-width="{}" '
                         'vector-effect="non-scaling-stroke" />'
                         .format(pts, attr(color), attr('none' if fill is None else fill),
                                 fmt(self.stroke_width, p)))
            n += 1
        lines.append('  </g>')
        lines.append('</svg>')
        log.debug('wrote %s polylines', n)
        return '\n'.join(lines) + '\n'
