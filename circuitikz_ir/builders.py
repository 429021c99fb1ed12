"""Element builders for nodes, wires and two-terminal paths."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple, Union

from .ast import Label, Node, Path, Position, Wire, WireSegment
from .config import ExtractorConfig
from .connectors import OPEN, ConnectorInfo, TerminalKind, classify_connector
from .coords import clean_position
from .labels import extract_label, isolate_value
from .logging_utils import apply_debug_logging
from .scanner import (
    PATH_GROUP_RULES,
    UnterminatedDelimiter,
    find_group_end,
    match_delimiter,
    split_options,
    strip_math,
    strip_outer_wrap,
)

if TYPE_CHECKING:  # pragma: no cover
    from .interpreter import InterpreterContext

logger = logging.getLogger(__name__)

NODE_SHAPE = 'node-shape'
NODE_NO_VISUAL_TYPE = 'node-no-visual-type'
PATH_NO_OPTIONS = 'path-no-options'
WIRE_DEGENERATE = 'wire-degenerate'

DEFAULT_POSITION = 'default'
DEFAULT_ANCHOR = 'default'
SHORT = 'short'

_node_head_re = re.compile(r'node\s*\[')
_label_position_re = re.compile(r'^\s*([A-Za-z0-9 .+\-]+?)\s*:(.*)$', re.DOTALL)
_component_key_re = re.compile(r'^(R|L|C|resistor|inductor|capacitor)\s*=')


def make_id(prefix: str, type_key: str, config: ExtractorConfig) -> str:
    return f"{prefix}_{config.canonical_name(type_key).replace(' ', '-')}"


def terminal_node(kind: TerminalKind, position: Position, config: ExtractorConfig) -> Node:
    return Node(make_id('node', kind, config), clean_position(position))


def emit_terminals(ctx: "InterpreterContext", info: ConnectorInfo, start: Position, end: Position) -> None:
    if info.start:
        ctx.emit(terminal_node(info.start, start, ctx.config))
    if info.end:
        ctx.emit(terminal_node(info.end, end, ctx.config))


def build_wire(ctx: "InterpreterContext", start: Position, end: Position) -> Optional[Wire]:
    """Emit a plain wire; wires never carry labels and discard a pending one."""
    ctx.discard_pending_label()
    start = clean_position(start)
    end = clean_position(end)
    if start == end:
        ctx.drop(WIRE_DEGENERATE, f"{start.x},{start.y}")
        return None
    wire = Wire(start, [WireSegment(end, ctx.config.wire_direction)])
    ctx.emit(wire)
    return wire


# Nodes --------------------------------------------------------------------


@dataclass
class NodeBuild:
    node: Node
    # carries a label but names no visual kind
    placeholder: bool = False


NodeResult = Union[NodeBuild, ConnectorInfo, None]


def split_node_spec(raw: str) -> Optional[Tuple[str, str]]:
    """Return ``(options, brace text)`` of ``node[...]{...}``, or None for other shapes."""
    m = _node_head_re.match(raw)
    if not m:
        return None
    open_index = m.end() - 1
    try:
        close = match_delimiter(raw, open_index, '[', ']')
    except UnterminatedDelimiter:
        return None
    options = raw[open_index + 1:close]
    rest = raw[close + 1:].strip()
    if not rest:
        return options, ''
    if rest.startswith('{') and rest.endswith('}'):
        return options, rest[1:-1].strip()
    return None


def _unwrap_group(value: str) -> str:
    if value.startswith('{'):
        try:
            if match_delimiter(value, 0, '{', '}') == len(value) - 1:
                return value[1:-1].strip()
        except UnterminatedDelimiter:
            pass
    return value


def parse_label_option(value: str, position: str, config: ExtractorConfig) -> Tuple[str, str]:
    """Handle ``label=[position:]text`` and return ``(text, position)``."""
    value = _unwrap_group(value.strip())
    m = _label_position_re.match(value)
    if m:
        return strip_outer_wrap(m.group(2).strip()), config.label_position(m.group(1))
    return isolate_value(value), position


def build_node(ctx: "InterpreterContext", raw: str, position: Position) -> NodeResult:
    config = ctx.config
    parts = split_node_spec(raw)
    if parts is None:
        ctx.drop(NODE_SHAPE, raw)
        return None
    options, text = parts
    text = strip_math(text)

    connector = classify_connector(options)
    if connector.is_special:
        return connector

    label_value = text
    label_position = DEFAULT_POSITION
    kind: Optional[str] = None
    for option in split_options(options):
        if option in config.label_positions:
            label_position = config.label_positions[option]
        elif '=' in option:
            key, value = option.split('=', 1)
            if key.strip() == 'label':
                label_value, label_position = parse_label_option(value, label_position, config)
        elif option and option != SHORT:
            kind = config.node_type_aliases.get(option, option)

    placeholder = False
    if kind is None and label_value:
        kind = OPEN
        placeholder = True
    if kind is None:
        ctx.drop(NODE_NO_VISUAL_TYPE, raw)
        return None

    label: Optional[Label] = Label(
        label_value,
        config.label_distance,
        anchor=DEFAULT_ANCHOR,
        position=label_position,
    )
    if label.is_empty:
        label = None
    node = Node(make_id('node', kind, config), clean_position(position), label)
    return NodeBuild(node, placeholder)


# Paths --------------------------------------------------------------------


def path_options(raw: str) -> Optional[str]:
    """Interior of the option bracket of a ``to[...]`` token."""
    start = raw.find('[')
    if start < 0:
        return None
    try:
        end = find_group_end(raw, start, PATH_GROUP_RULES)
    except UnterminatedDelimiter:
        return None
    return raw[start + 1:end]


def _bare_option(options: Sequence[str]) -> str:
    for option in options:
        if option and '=' not in option:
            return option
    return ''


def _component_key(options: Sequence[str]) -> str:
    for option in options:
        m = _component_key_re.match(option)
        if m:
            return m.group(1)
    return ''


def _first_option_key(options: Sequence[str]) -> str:
    if not options:
        return ''
    first = options[0]
    if '=' in first:
        return first.split('=', 1)[0].strip()
    return first


# Tried in order, the first non-empty key wins.
TYPE_KEY_RULES: List[Callable[[Sequence[str]], str]] = [
    _bare_option,
    _component_key,
    _first_option_key,
]


def component_type_key(options: Sequence[str]) -> str:
    for rule in TYPE_KEY_RULES:
        key = rule(options)
        if key:
            return key
    return ''


def build_path(ctx: "InterpreterContext", raw: str, start: Position, end: Position) -> None:
    options_text = path_options(raw)
    if options_text is None:
        ctx.drop(PATH_NO_OPTIONS, raw)
        return

    connector = classify_connector(options_text)
    if connector.is_special:
        build_wire(ctx, start, end)
        emit_terminals(ctx, connector, start, end)
        return

    type_key = component_type_key(split_options(options_text))
    if type_key == SHORT:
        build_wire(ctx, start, end)
        return

    label = Label(extract_label(options_text), ctx.config.label_distance)
    if not label.value:
        pending = ctx.take_pending_label()
        if pending is not None:
            label.value = pending.value

    ctx.emit(Path(
        make_id('path', type_key, ctx.config),
        clean_position(start),
        clean_position(end),
        label,
    ))


apply_debug_logging(globals(), logger=logger)
