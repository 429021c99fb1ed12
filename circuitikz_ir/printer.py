from typing import Iterable, List

from .ast import Coordinate, NodeSpec, PathSpec, Token, WireMarker
from .builders import path_options
from .labels import extract_label


def format_token(token: Token) -> str:
    if isinstance(token, Coordinate):
        return f"({token.raw_x},{token.raw_y})"
    if isinstance(token, WireMarker):
        return token.raw
    if isinstance(token, (NodeSpec, PathSpec)):
        return token.raw
    raise ValueError(f"unknown token {token!r}")


def format_tokens(tokens: Iterable[Token]) -> str:
    """One line per token; ``to`` paths are followed by their options and label."""
    lines: List[str] = []
    for idx, token in enumerate(tokens):
        lines.append(f"Token {idx}: {type(token).__name__} '{format_token(token)}'")
        if isinstance(token, PathSpec):
            options = path_options(token.raw)
            if options is None:
                lines.append("  options: (none)")
                continue
            lines.append(f"  options: '{options}'")
            lines.append(f"  label: '{extract_label(options)}'")
    return '\n'.join(lines) + ('\n' if lines else '')
