#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Draws a branching L-system tree, as SVG file or on the terminal.

Usage: tree.py [DEPTH] [OUT.svg]
"""

from sys import argv
from turtledraw import draw
from turtledraw.canvas import CanvasRenderer
from turtledraw.svg import SvgRenderer

rules = {'X': 'F[+X][-X]FX', 'F': 'FF'}
actions = {
    'F': ['fwd', 4],
    '+': ['left', 25],
    '-': ['right', 25],
    '[': ['save'],
    ']': ['restore'],
}

def expand(axiom, depth):
    for _ in range(depth):
        axiom = ''.join(rules.get(c, c) for c in axiom)
    return axiom

def commands(depth):
    return [['color-index', 1]] + [actions[c] for c in expand('X', depth) if c in actions]

if __name__ == '__main__':
    depth = int(argv[1]) if len(argv) > 1 else 4
    if len(argv) > 2:
        with open(argv[2], 'w') as f: f.write(draw(SvgRenderer(), commands(depth), (400, 400)))
    else:
        print(draw(CanvasRenderer(), commands(depth), (160, 160)).frame())
