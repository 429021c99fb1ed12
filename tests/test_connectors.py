import pytest

from circuitikz_ir.connectors import FILLED, OPEN, classify_connector

SHAPES = [
    ('-o', None, OPEN),
    ('o-', OPEN, None),
    ('o-o', OPEN, OPEN),
    ('*-*', FILLED, FILLED),
    ('*-o', FILLED, OPEN),
    ('o-*', OPEN, FILLED),
]


@pytest.mark.parametrize('prefix', ['', 'short,', 'short, ', 'short,   '])
@pytest.mark.parametrize('shape, start, end', SHAPES)
def test_every_shorthand_classifies(prefix, shape, start, end):
    info = classify_connector(f"  {prefix}{shape} ")
    assert info.is_special
    assert (info.start, info.end) == (start, end)


@pytest.mark.parametrize(
    'text',
    ['short', 'R', 'R, -o', '-*', 'o', '-o, l=x', 'short,,-o', 'american resistor', ''],
)
def test_other_text_is_not_special(text):
    info = classify_connector(text)
    assert not info.is_special
    assert info.terminals == (None, None)
