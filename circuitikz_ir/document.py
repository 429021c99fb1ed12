"""Document-level collaborators: locate the drawing block and pull draw commands out of it."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from .config import ExtractorConfig
from .interpreter import ConversionResult, extract_elements

logger = logging.getLogger(__name__)

_block_re = re.compile(r'\\begin\{(circuitikz|tikzpicture)\}(.*?)\\end\{\1\}', re.DOTALL)
_coordinate_def_re = re.compile(r'\\coordinate\s*\((.*?)\)\s*at\s*\((.*?)\);', re.DOTALL)
_draw_re = re.compile(r'\\draw(\[.*?\])?(.*?);', re.DOTALL)
_arrow_re = re.compile(r'<->|->|<-')
_node_re = re.compile(
    r'\\node\s*(\[[^\]]*\])?\s*at\s*\(([^)]+)\)\s*(\[[^\]]*\])?\s*\{([^}]*)\}\s*;',
    re.DOTALL,
)


class NoCircuitBlockError(ValueError):
    """The document has no circuitikz or tikzpicture environment."""


def extract_circuit_block(latex: str) -> Optional[str]:
    m = _block_re.search(latex)
    return m.group(2) if m else None


def _comment_start(line: str) -> int:
    for i, ch in enumerate(line):
        if ch == '%' and (i == 0 or line[i - 1] != '\\'):
            return i
    return -1


def remove_comments(text: str) -> str:
    """Drop ``%`` comments (but not ``\\%``) and the blank lines left behind."""
    lines: List[str] = []
    for line in text.split('\n'):
        cut = _comment_start(line)
        if cut >= 0:
            line = line[:cut].rstrip()
        if line.strip():
            lines.append(line)
    return '\n'.join(lines)


def parse_coordinate_definitions(text: str) -> Dict[str, str]:
    return {
        m.group(1).strip(): f"({m.group(2).strip()})"
        for m in _coordinate_def_re.finditer(text)
    }


def replace_named_coords(text: str, coords: Dict[str, str]) -> str:
    for name, value in coords.items():
        text = text.replace(f"({name})", value)
    return text


def _strip_brackets(options: str) -> str:
    options = options.strip()
    if options.startswith('[') and options.endswith(']'):
        return options[1:-1]
    return options


def extract_draw_commands(text: str) -> List[str]:
    """Return the bodies of ``\\draw`` commands, then standalone ``\\node`` commands as draw bodies.

    Draw commands whose options request arrow tips are annotations, not
    circuit wiring, and are skipped.
    """
    commands: List[str] = []
    for m in _draw_re.finditer(text):
        options = m.group(1) or ''
        if _arrow_re.search(options):
            logger.debug("Skipping arrow draw %r", m.group(0))
            continue
        commands.append(m.group(2).strip())

    for m in _node_re.finditer(text):
        before, at, after, label = m.group(1), m.group(2), m.group(3), m.group(4)
        options = _strip_brackets(before or after or '') or 'above'
        commands.append(f"({at.strip()}) node[{options}]{{{label.strip()}}}")
    return commands


def document_commands(latex: str) -> List[str]:
    """Cleaned, coordinate-resolved draw commands of one document."""
    block = extract_circuit_block(latex)
    if block is None:
        raise NoCircuitBlockError('no \\begin{circuitikz} or \\begin{tikzpicture} block found')
    block = remove_comments(block)
    coords = parse_coordinate_definitions(block)
    logger.debug("Found %d named coordinate(s)", len(coords))
    commands = [replace_named_coords(cmd, coords) for cmd in extract_draw_commands(block)]
    logger.debug("Found %d draw command(s)", len(commands))
    return commands


def convert_document(latex: str, config: Optional[ExtractorConfig] = None) -> ConversionResult:
    return extract_elements(document_commands(latex), config)
