"""Nested-delimiter scanning shared by the lexer, option splitter and label extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

MATH = '$'
ESCAPE = '\\'


class UnterminatedDelimiter(SyntaxError):
    """Raised when a scan reaches the end of the text with open delimiters."""

    def __init__(self, open_index: int, open_char: str):
        super().__init__(f"[col {open_index + 1}] unterminated {open_char!r}")
        self.open_index = open_index
        self.open_char = open_char


@dataclass(frozen=True)
class ScanRules:
    """Which delimiters nest, which character toggles an opaque region, what escapes."""

    pairs: Tuple[Tuple[str, str], ...] = ()
    toggle: Optional[str] = None
    escape: Optional[str] = None


# Option lists: brace groups and math regions are opaque.
OPTION_RULES = ScanRules(pairs=(('{', '}'),), toggle=MATH, escape=ESCAPE)
# A to[...] group: brackets and braces nest only outside math regions.
PATH_GROUP_RULES = ScanRules(pairs=(('[', ']'), ('{', '}')), toggle=MATH, escape=ESCAPE)
# A single math region, starting on its opening marker.
MATH_RULES = ScanRules(toggle=MATH, escape=ESCAPE)
COORDINATE_RULES = ScanRules(pairs=(('(', ')'), ('{', '}')))


def walk(text: str, start: int, rules: ScanRules) -> Iterator[Tuple[int, str, bool]]:
    """Yield ``(index, chunk, balanced)`` for every step from ``start``.

    ``chunk`` is a single character, or an escape character together with the
    character it escapes. ``balanced`` tells whether every pair is closed and
    the toggle region is off once the chunk has been consumed.
    """
    opens = {o: idx for idx, (o, _) in enumerate(rules.pairs)}
    closes = {c: idx for idx, (_, c) in enumerate(rules.pairs)}
    depth = [0] * len(rules.pairs)
    in_toggle = False
    i = start
    n = len(text)
    while i < n:
        ch = text[i]
        if rules.escape is not None and ch == rules.escape and i + 1 < n:
            yield i, text[i:i + 2], not in_toggle and not any(depth)
            i += 2
            continue
        if rules.toggle is not None and ch == rules.toggle:
            in_toggle = not in_toggle
        elif not in_toggle:
            # open is checked first so symmetric pairs never double count
            if ch in opens:
                depth[opens[ch]] += 1
            elif ch in closes:
                depth[closes[ch]] -= 1
        yield i, ch, not in_toggle and not any(depth)
        i += 1


def find_group_end(text: str, start: int, rules: ScanRules) -> int:
    """Return the index of the character that closes the group opened at ``start``."""
    for i, chunk, balanced in walk(text, start, rules):
        if balanced:
            return i + len(chunk) - 1
    raise UnterminatedDelimiter(start, text[start] if start < len(text) else '')


def match_delimiter(text: str, open_index: int, open_char: str, close_char: str) -> int:
    if open_index >= len(text) or text[open_index] != open_char:
        raise ValueError(f"expected {open_char!r} at index {open_index}")
    return find_group_end(text, open_index, ScanRules(pairs=((open_char, close_char),)))


def split_top_level(text: str, sep: str = ',', rules: ScanRules = OPTION_RULES) -> List[str]:
    parts: List[str] = []
    current: List[str] = []
    for _, chunk, balanced in walk(text, 0, rules):
        if chunk == sep and balanced:
            parts.append(''.join(current))
            current = []
        else:
            current.append(chunk)
    parts.append(''.join(current))
    return parts


def split_options(text: str) -> List[str]:
    """Split the interior of an option bracket on top-level commas.

    Options are trimmed. Empty options in the middle are kept; an empty
    trailing fragment is dropped.
    """
    options = [part.strip() for part in split_top_level(text)]
    if options and not options[-1]:
        options.pop()
    return options


def strip_outer_wrap(value: str) -> str:
    """Peel outer ``{...}`` and ``$...$`` layers until nothing changes."""
    while True:
        before = value
        if len(value) >= 2 and value.startswith('{') and value.endswith('}'):
            value = value[1:-1]
        if len(value) >= 2 and value.startswith(MATH) and value.endswith(MATH):
            value = value[1:-1]
        if value == before:
            return value


def strip_math(value: str) -> str:
    if len(value) >= 2 and value.startswith(MATH) and value.endswith(MATH):
        return value[1:-1]
    return value
