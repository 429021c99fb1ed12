import pytest

from circuitikz_ir.labels import extract_label, isolate_value


@pytest.mark.parametrize(
    'options, expected',
    [
        ('R, l=$R_1$', 'R_1'),
        ('R=10k', '10k'),
        ('L=$L_1$, i=$i_L$', 'L_1'),
        ('C=1uF', '1uF'),
        ('V, v=$V_s$', 'V_s'),
        ('I, i>=$I_0$', 'I_0'),
        ('I, i_=$I_0$', 'I_0'),
        ('R, l_=$R_2$', 'R_2'),
        ('american resistor', ''),
        ('short', ''),
    ],
)
def test_extract_label_by_key(options, expected):
    assert extract_label(options) == expected


def test_first_key_in_priority_order_wins():
    # R= appears first in the text, l= has priority
    assert extract_label('R=$R_a$, l=$R_b$') == 'R_b'
    assert extract_label('i=$i$, v=$v$') == 'v'


def test_label_key_needs_word_boundary():
    assert extract_label('fill=red, label=x') == ''


def test_math_value_keeps_commas():
    assert extract_label('R, l=$a, b$, v=c') == 'a, b'


def test_math_value_skips_escaped_marker():
    assert extract_label(r'R, l=$a\$b$') == r'a\$b'


def test_brace_value_taken_whole():
    assert extract_label('R, l={x, {y}}, i=z') == 'x, {y}'


def test_doubly_wrapped_value():
    assert extract_label('R, l=${R_1}$') == 'R_1'
    assert extract_label('R, l={$R_1$}') == 'R_1'


def test_plain_value_stops_at_comma():
    assert extract_label('R, l=R1, *-*') == 'R1'


def test_unterminated_math_keeps_remainder():
    assert isolate_value('$abc') == '$abc'
