from turtledraw.errors import TokenError
from turtledraw.state import process
from turtledraw.tokens import read_tokens, format_tokens
import pytest

def test_read_tokens():
    assert read_tokens('color red fwd 50 [left 90 fwd 2.5]') == ['color', 'red', 'fwd', 50, ['left', 90, 'fwd', 2.5]]
    assert read_tokens('save [[fwd 1] restore]') == ['save', [['fwd', 1], 'restore']]
    assert read_tokens('color #663300  ; brown\nfwd 1') == ['color', '#663300', 'fwd', 1]
    assert read_tokens('fwd -5 left +3 x 1e2 y .5 color-index 3') == ['fwd', -5, 'left', 3, 'x', 100.0, 'y', 0.5, 'color-index', 3]
    assert read_tokens('') == []
    assert read_tokens('  ; nothing') == []

def test_read_tokens_errors():
    for text in ('[fwd 1', 'fwd 1]', ']'):
        with pytest.raises(TokenError): read_tokens(text)

def test_format_tokens():
    tokens = ['save', ['left', 45, 'fwd', 2.5], 'restore']
    assert format_tokens(tokens) == 'save [left 45 fwd 2.5] restore'
    assert read_tokens(format_tokens(tokens)) == tokens

def test_tokens_drive_the_turtle():
    states = process(read_tokens('save [left 90 fwd 10] restore fwd 10'))
    assert [s.coords for s in states] == [(0, 0), (0, 0), (0, 0), (-10, 0), (0, 0), (0, 10)]
