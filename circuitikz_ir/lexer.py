import logging
from typing import List, Optional

from .ast import Coordinate, NodeSpec, PathSpec, Token, WireMarker
from .scanner import COORDINATE_RULES, PATH_GROUP_RULES, find_group_end, match_delimiter, split_top_level

logger = logging.getLogger(__name__)

WS = ' \t\r\n\f\v'


def _skip_ws(s: str, i: int) -> int:
    n = len(s)
    while i < n and s[i] in WS:
        i += 1
    return i


def _is_ident(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def _at_keyword(s: str, i: int, keyword: str) -> bool:
    if not s.startswith(keyword, i):
        return False
    if i > 0 and _is_ident(s[i - 1]):
        return False
    end = i + len(keyword)
    return end >= len(s) or not _is_ident(s[end])


def _coordinate(raw: str) -> Optional[Coordinate]:
    parts = split_top_level(raw[1:-1], ',', COORDINATE_RULES)
    if len(parts) < 2:
        return None
    return Coordinate(parts[0].strip(), ','.join(parts[1:]).strip())


def _scan_node(s: str, i: int) -> int:
    i = _skip_ws(s, i + len('node'))
    end = i
    if i < len(s) and s[i] == '[':
        end = i = match_delimiter(s, i, '[', ']') + 1
    i = _skip_ws(s, i)
    if i < len(s) and s[i] == '{':
        end = match_delimiter(s, i, '{', '}') + 1
    return end


def _scan_path(s: str, i: int) -> int:
    i = _skip_ws(s, i + len('to'))
    if i < len(s) and s[i] == '[':
        return find_group_end(s, i, PATH_GROUP_RULES) + 1
    return i


def tokenize(s: str, rejected: Optional[List[str]] = None) -> List[Token]:
    """Split one draw command into coordinates, ``--`` markers, nodes and ``to`` paths.

    Characters that start none of these are skipped. Parenthesized spans
    without a top-level comma give no token; they are appended to ``rejected``
    when a list is passed. Raises
    :class:`~circuitikz_ir.scanner.UnterminatedDelimiter` when a group never closes.
    """
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        i = _skip_ws(s, i)
        if i >= n:
            break
        ch = s[i]
        if ch == '(':
            end = match_delimiter(s, i, '(', ')') + 1
            coord = _coordinate(s[i:end])
            if coord is not None:
                tokens.append(coord)
            else:
                logger.debug("Ignoring coordinate without a comma: %r", s[i:end])
                if rejected is not None:
                    rejected.append(s[i:end])
            i = end
            continue
        if s.startswith('--', i):
            tokens.append(WireMarker())
            i += 2
            continue
        if _at_keyword(s, i, 'node'):
            end = _scan_node(s, i)
            tokens.append(NodeSpec(s[i:end].strip()))
            i = end
            continue
        if _at_keyword(s, i, 'to'):
            end = _scan_path(s, i)
            tokens.append(PathSpec(s[i:end].strip()))
            i = end
            continue
        i += 1
    return tokens
