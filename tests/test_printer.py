import pytest

from circuitikz_ir.ast import Coordinate, NodeSpec, PathSpec, WireMarker
from circuitikz_ir.lexer import tokenize
from circuitikz_ir.printer import format_token, format_tokens


def test_format_tokens_lists_tokens_and_path_labels():
    out = format_tokens(tokenize('(0,0) to[R, l=$R_1$] (2,0) -- (2,1) node[circ]{}'))
    assert out == (
        "Token 0: Coordinate '(0,0)'\n"
        "Token 1: PathSpec 'to[R, l=$R_1$]'\n"
        "  options: 'R, l=$R_1$'\n"
        "  label: 'R_1'\n"
        "Token 2: Coordinate '(2,0)'\n"
        "Token 3: WireMarker '--'\n"
        "Token 4: Coordinate '(2,1)'\n"
        "Token 5: NodeSpec 'node[circ]{}'\n"
    )


def test_format_tokens_bare_path_and_empty():
    assert format_tokens([PathSpec('to')]) == "Token 0: PathSpec 'to'\n  options: (none)\n"
    assert format_tokens([]) == ''


def test_format_token_round_trips_raw_text():
    assert format_token(Coordinate('1', '-2')) == '(1,-2)'
    assert format_token(WireMarker()) == '--'
    assert format_token(NodeSpec('node[circ]')) == 'node[circ]'


def test_format_token_rejects_unknown():
    with pytest.raises(ValueError):
        format_token('(0,0)')
