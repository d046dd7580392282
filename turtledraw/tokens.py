# -*- coding: utf-8 -*-

# License: GNU AGPLv3+ (see LICENSE file or http://www.gnu.org/licenses)

"""
Reads command tokens from text, e.g. for the command line and the REPL:

    color red fwd 50 [left 90 fwd 50]  ; comment

Tokens are separated by whitespace, square brackets group tokens into nested
lists and `;` starts a comment. Numbers are converted to int or float, all
other tokens stay strings. There are no statements or expressions; the
result is handed to the reducer as is.
"""

import logging, re
import lark

from turtledraw.errors import TokenError

log = logging.getLogger(__name__)

INT   = re.compile(r'[+-]?\d+')
FLOAT = re.compile(r'[+-]?(\d+\.\d*|\.\d+|\d+(?=[eE]))([eE][+-]?\d+)?')

grammar = r"""
start: _item*
_item: group | ATOM
group: "[" _item* "]"

ATOM:    /[^\s\[\];]+/
COMMENT: /;[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""


def atom(text):
    if INT.fullmatch(text):   return int(text)
    if FLOAT.fullmatch(text): return float(text)
    return text


class TokenTransformer(lark.Transformer):
    def start(t, items): return list(items)
    def group(t, items): return list(items)
    def ATOM(t, token):  return atom(token.value)


parser = lark.Lark(grammar, parser='lalr')


def read_tokens(text):
    """Returns the nested token list for `text`.

    :param text: String. Whitespace separated tokens
    """
    try:
        tokens = TokenTransformer().transform(parser.parse(text))
    except lark.exceptions.LarkError as err:
        raise TokenError('cannot read tokens: {}'.format(err)) from err
    log.debug('read tokens: %s', tokens)
    return tokens


def format_tokens(tokens):
    """Formats a nested token list so that :func:`read_tokens` reads it back."""
    return ' '.join('[{}]'.format(format_tokens(t)) if isinstance(t, list) else str(t) for t in tokens)
