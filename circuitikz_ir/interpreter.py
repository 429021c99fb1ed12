"""Token-stream interpreter: turns draw-command tokens into circuit elements."""

from __future__ import annotations

import dataclasses
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .ast import ORIGIN, Circuit, Coordinate, Element, Label, NodeSpec, PathSpec, Position, Token, WireMarker
from .builders import build_node, build_path, build_wire, emit_terminals
from .config import ExtractorConfig, get_extractor_config, resolve_config
from .connectors import ConnectorInfo
from .coords import convert_coordinate
from .lexer import tokenize
from .logging_utils import apply_debug_logging
from .scanner import UnterminatedDelimiter

logger = logging.getLogger(__name__)

TOKEN_SKIPPED = 'token-skipped'
UNTERMINATED = 'unterminated-delimiter'
COORDINATE_SHAPE = 'coordinate-shape'


@dataclass
class DropEvent:
    reason: str
    detail: str = ''


@dataclass
class Diagnostics:
    """Record of fragments that were dropped instead of producing elements."""

    events: List[DropEvent] = field(default_factory=list)

    def record(self, reason: str, detail: str = '') -> None:
        logger.debug("Dropped %s: %r", reason, detail)
        self.events.append(DropEvent(reason, detail))

    def counts(self) -> Counter:
        return Counter(event.reason for event in self.events)

    def __len__(self) -> int:
        return len(self.events)


@dataclass
class InterpreterContext:
    """Per-document interpreter state.

    ``current_position`` follows the pen; ``pending_label`` holds a label
    typed on a placeholder node until the next component takes it.
    """

    config: ExtractorConfig = field(default_factory=get_extractor_config)
    current_position: Position = ORIGIN
    pending_label: Optional[Label] = None
    circuit: Circuit = field(default_factory=Circuit)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def emit(self, element: Element) -> None:
        self.circuit.append(element)

    def drop(self, reason: str, detail: str = '') -> None:
        self.diagnostics.record(reason, detail)

    def convert(self, coord: Coordinate) -> Position:
        return convert_coordinate(coord, self.config.scale_factor)

    def take_pending_label(self) -> Optional[Label]:
        label, self.pending_label = self.pending_label, None
        return label

    def discard_pending_label(self) -> None:
        if self.pending_label is not None:
            logger.debug("Wire discards pending label %r", self.pending_label.value)
        self.pending_label = None

    def debug_summary(self) -> str:
        return (
            f"ctx(pos=({self.current_position.x}, {self.current_position.y}), "
            f"pending={self.pending_label.value if self.pending_label else None!r}, "
            f"elements={len(self.circuit)})"
        )


@dataclass
class ConversionResult:
    circuit: Circuit
    diagnostics: Diagnostics


def place_node(ctx: InterpreterContext, token: NodeSpec) -> None:
    position = ctx.current_position
    result = build_node(ctx, token.raw, position)
    if result is None:
        return
    if isinstance(result, ConnectorInfo):
        # both terminals of a node shorthand sit on the node itself
        emit_terminals(ctx, result, position, position)
        return
    node = result.node
    if (node.label is None or not node.label.value) and ctx.pending_label is not None:
        node.label = ctx.take_pending_label()
    ctx.emit(node)
    if result.placeholder and node.label is not None:
        ctx.pending_label = dataclasses.replace(node.label)


def process_tokens(tokens: Sequence[Token], ctx: InterpreterContext) -> None:
    i = 0
    n = len(tokens)
    while i < n:
        token = tokens[i]
        if isinstance(token, Coordinate):
            ctx.current_position = ctx.convert(token)
            i += 1
            continue
        if isinstance(token, NodeSpec):
            place_node(ctx, token)
            i += 1
            continue

        nxt = tokens[i + 1] if i + 1 < n else None
        if isinstance(token, (WireMarker, PathSpec)) and isinstance(nxt, Coordinate):
            start = ctx.current_position
            end = ctx.convert(nxt)
            if isinstance(token, WireMarker):
                build_wire(ctx, start, end)
            else:
                build_path(ctx, token.raw, start, end)
            ctx.current_position = end
            i += 2
            if i < n and isinstance(tokens[i], NodeSpec):
                place_node(ctx, tokens[i])
                i += 1
            continue

        ctx.drop(TOKEN_SKIPPED, repr(token))
        i += 1


def interpret_command(text: str, ctx: InterpreterContext) -> None:
    rejected: List[str] = []
    try:
        tokens = tokenize(text, rejected)
    except UnterminatedDelimiter as exc:
        logger.warning("Skipping draw command %r: %s", text, exc)
        ctx.drop(UNTERMINATED, text)
        return
    for raw in rejected:
        ctx.drop(COORDINATE_SHAPE, raw)
    process_tokens(tokens, ctx)


def extract_elements(
    commands: Iterable[str],
    config: Optional[ExtractorConfig] = None,
) -> ConversionResult:
    """Interpret the draw commands of one document, in order, with fresh state."""
    ctx = InterpreterContext(config=resolve_config(config))
    for command in commands:
        interpret_command(command, ctx)
    logger.info(
        "Extracted %d element(s), dropped %d fragment(s)",
        len(ctx.circuit),
        len(ctx.diagnostics),
    )
    return ConversionResult(ctx.circuit, ctx.diagnostics)


apply_debug_logging(
    globals(),
    logger=logger,
    skip={'Diagnostics', 'DropEvent', 'ConversionResult', 'InterpreterContext'},
)
