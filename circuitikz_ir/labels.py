"""Label text extraction from component option strings."""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .scanner import (
    MATH,
    MATH_RULES,
    UnterminatedDelimiter,
    find_group_end,
    match_delimiter,
    split_top_level,
    strip_outer_wrap,
)

logger = logging.getLogger(__name__)

# Label-bearing keys in priority order: the first key present wins.
LABEL_KEYS: List[Tuple[str, re.Pattern]] = [
    ('l', re.compile(r'\bl[_^]?=(.*)', re.DOTALL)),
    ('R', re.compile(r'\bR=(.*)', re.DOTALL)),
    ('L', re.compile(r'\bL=(.*)', re.DOTALL)),
    ('C', re.compile(r'\bC=(.*)', re.DOTALL)),
    ('v', re.compile(r'\bv[_^<>]?=(.*)', re.DOTALL)),
    ('i', re.compile(r'\bi[_^<>]*=(.*)', re.DOTALL)),
]


def isolate_value(after_equals: str) -> str:
    """Cut the value that starts ``after_equals`` off the rest of the option text.

    A math region or brace group is taken whole; anything else runs up to the
    next top-level comma. Outer wrapping is stripped from the result.
    """
    text = after_equals.strip()
    value = text
    try:
        if text.startswith(MATH):
            value = text[:find_group_end(text, 0, MATH_RULES) + 1]
        elif text.startswith('{'):
            value = text[:match_delimiter(text, 0, '{', '}') + 1]
        else:
            value = split_top_level(text)[0]
    except UnterminatedDelimiter as exc:
        logger.debug("Label value %r is not closed (%s); keeping the remainder", text, exc)
    return strip_outer_wrap(value.strip())


def extract_label(options: str) -> str:
    for key, pattern in LABEL_KEYS:
        m = pattern.search(options)
        if m:
            logger.debug("Label key %r matched in %r", key, options)
            return isolate_value(m.group(1))
    return ''
