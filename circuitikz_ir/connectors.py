"""Two-terminal connector shorthand such as ``-o`` or ``*-*``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

TerminalKind = Literal['circ', 'ocirc']

FILLED: TerminalKind = 'circ'
OPEN: TerminalKind = 'ocirc'

# shape -> (start terminal, end terminal)
CONNECTOR_SHAPES: Dict[str, Tuple[Optional[TerminalKind], Optional[TerminalKind]]] = {
    '-o': (None, OPEN),
    'o-': (OPEN, None),
    'o-o': (OPEN, OPEN),
    '*-*': (FILLED, FILLED),
    '*-o': (FILLED, OPEN),
    'o-*': (OPEN, FILLED),
}

_short_prefix_re = re.compile(r'^short,\s*')


@dataclass(frozen=True)
class ConnectorInfo:
    is_special: bool = False
    start: Optional[TerminalKind] = None
    end: Optional[TerminalKind] = None

    @property
    def terminals(self) -> Tuple[Optional[TerminalKind], Optional[TerminalKind]]:
        return self.start, self.end


NOT_SPECIAL = ConnectorInfo()


def classify_connector(options: str) -> ConnectorInfo:
    text = options.strip()
    m = _short_prefix_re.match(text)
    if m:
        text = text[m.end():]
    shape = CONNECTOR_SHAPES.get(text)
    if shape is None:
        return NOT_SPECIAL
    return ConnectorInfo(True, *shape)
