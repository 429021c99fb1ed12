import pytest

from circuitikz_ir.ast import Label, Node, Path, Position, Wire
from circuitikz_ir.builders import (
    NodeBuild,
    build_node,
    build_path,
    build_wire,
    component_type_key,
    make_id,
    path_options,
    split_node_spec,
)
from circuitikz_ir.config import ExtractorConfig
from circuitikz_ir.connectors import ConnectorInfo
from circuitikz_ir.interpreter import InterpreterContext

P0 = Position(0.0, 0.0)
P1 = Position(75.59, 0.0)


def ctx():
    return InterpreterContext(config=ExtractorConfig())


def test_make_id_resolves_aliases_and_hyphenates():
    config = ExtractorConfig()
    assert make_id('path', 'R', config) == 'path_american-resistor'
    assert make_id('path', 'voltage source', config) == 'path_american-voltage-source'
    assert make_id('node', 'ocirc', config) == 'node_ocirc'
    assert make_id('path', 'european resistor', config) == 'path_european-resistor'


@pytest.mark.parametrize(
    'options, expected',
    [
        (['R', 'l=$R_1$'], 'R'),
        (['l=$x$', 'american inductor'], 'american inductor'),
        (['l=$x$', 'R=10k'], 'R'),
        (['i=$x$', 'capacitor=1u'], 'capacitor'),
        (['l=$x$', 'v=3'], 'l'),
        (['short'], 'short'),
        ([], ''),
    ],
)
def test_component_type_key(options, expected):
    assert component_type_key(options) == expected


def test_split_node_spec_shapes():
    assert split_node_spec('node[circ]{$A$}') == ('circ', '$A$')
    assert split_node_spec('node [above] { x }') == ('above', 'x')
    assert split_node_spec('node[circ]') == ('circ', '')
    assert split_node_spec('node{A}') is None
    assert split_node_spec('node') is None


def test_path_options():
    assert path_options('to[R, l=$[a]$]') == 'R, l=$[a]$'
    assert path_options('to') is None


def test_build_wire_drops_degenerate_segment():
    c = ctx()
    assert build_wire(c, Position(0.0001, 0.0), Position(0.0, -0.0)) is None
    assert c.circuit.elements == []
    assert c.diagnostics.counts()['wire-degenerate'] == 1


def test_build_wire_discards_pending_label():
    c = ctx()
    c.pending_label = Label('x', '0.12cm', 'default', 'default')
    wire = build_wire(c, P0, P1)
    assert isinstance(wire, Wire)
    assert wire.segments[0].routing == '-|'
    assert c.pending_label is None


def test_build_node_with_alias_and_label():
    result = build_node(ctx(), 'node[*, label=above:$V_1$]{}', P0)
    assert isinstance(result, NodeBuild)
    assert result.node == Node(
        'node_circ',
        P0,
        Label('V_1', '0.12cm', anchor='default', position='north'),
    )
    assert not result.placeholder


def test_build_node_label_with_braces_and_unknown_position():
    result = build_node(ctx(), 'node[circ, label={30:${v}$}]{}', P0)
    assert result.node.label.value == 'v'
    assert result.node.label.position == '30'


def test_build_node_label_without_position():
    result = build_node(ctx(), 'node[circ, label=$V_{cc}$]{}', P0)
    assert result.node.label.value == 'V_{cc}'
    assert result.node.label.position == 'default'


def test_build_node_label_colon_inside_math_is_not_a_position():
    result = build_node(ctx(), 'node[circ, label=$a:b$]{}', P0)
    assert result.node.label.value == 'a:b'
    assert result.node.label.position == 'default'


def test_build_node_position_keyword_and_brace_text():
    result = build_node(ctx(), 'node[ocirc, right]{$V_{in}$}', P0)
    assert result.node.id == 'node_ocirc'
    assert result.node.label.value == 'V_{in}'
    assert result.node.label.position == 'east'


def test_label_only_node_becomes_open_circle_placeholder():
    result = build_node(ctx(), 'node[above]{$A$}', P0)
    assert result.placeholder
    assert result.node.id == 'node_ocirc'
    assert result.node.label.value == 'A'


def test_node_without_visual_type_is_dropped():
    c = ctx()
    assert build_node(c, 'node[above]{}', P0) is None
    assert build_node(c, 'node[short]{}', P0) is None
    assert c.diagnostics.counts()['node-no-visual-type'] == 2


def test_malformed_node_is_dropped():
    c = ctx()
    assert build_node(c, 'node{A}', P0) is None
    assert c.diagnostics.counts()['node-shape'] == 1


def test_node_connector_shorthand_is_returned_as_is():
    result = build_node(ctx(), 'node[short, o-*]{}', P0)
    assert isinstance(result, ConnectorInfo)
    assert (result.start, result.end) == ('ocirc', 'circ')


def test_build_path_uses_type_and_label():
    c = ctx()
    build_path(c, 'to[R, l=$R_1$]', P0, P1)
    assert c.circuit.elements == [
        Path('path_american-resistor', P0, P1, Label('R_1', '0.12cm')),
    ]


def test_build_path_takes_pending_value_only():
    c = ctx()
    c.pending_label = Label('A', '0.12cm', 'default', 'north')
    build_path(c, 'to[C]', P0, P1)
    (path,) = c.circuit.elements
    assert path.label == Label('A', '0.12cm')
    assert c.pending_label is None


def test_build_path_own_label_keeps_pending():
    c = ctx()
    pending = Label('A', '0.12cm', 'default', 'north')
    c.pending_label = pending
    build_path(c, 'to[C=$C_1$]', P0, P1)
    assert c.circuit.elements[0].label.value == 'C_1'
    assert c.pending_label is pending


def test_build_path_short_is_a_wire():
    c = ctx()
    c.pending_label = Label('A', '0.12cm', 'default', 'north')
    build_path(c, 'to[short, l=x]', P0, P1)
    assert [type(el) for el in c.circuit.elements] == [Wire]
    assert c.pending_label is None


def test_build_path_unknown_type_passes_through():
    c = ctx()
    build_path(c, 'to[generic, l=Z]', P0, P1)
    assert c.circuit.elements[0].id == 'path_generic'


def test_build_path_without_options_is_dropped():
    c = ctx()
    build_path(c, 'to', P0, P1)
    assert c.circuit.elements == []
    assert c.diagnostics.counts()['path-no-options'] == 1
