"""Source-to-output coordinate transform."""

from __future__ import annotations

import re
from typing import Tuple

import numpy as np

from .ast import Coordinate, Position

DECIMALS = 3

_leading_num_re = re.compile(r'\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def parse_number(raw: str) -> float:
    """Leading numeric prefix of ``raw`` (``'1.5cm'`` -> 1.5), 0.0 when there is none."""
    m = _leading_num_re.match(raw)
    if not m:
        return 0.0
    return float(m.group(0))


def clean_value(value: float) -> float:
    """Round to three decimals on the decimal value, never returning ``-0.0``."""
    rounded = round(float(value), DECIMALS)
    if rounded == 0:
        return 0.0
    return rounded


def clean_position(pos: Position) -> Position:
    return Position(clean_value(pos.x), clean_value(pos.y))


def transform_xy(x: float, y: float, scale: float) -> Tuple[float, float]:
    # round(), not np.round: 1.5 * 37.795 must give 56.693
    scaled = np.array([x, y], dtype=float) * np.array([scale, -scale])
    return clean_value(scaled[0]), clean_value(scaled[1])


def convert_coordinate(coord: Coordinate, scale: float) -> Position:
    x, y = transform_xy(parse_number(coord.raw_x), parse_number(coord.raw_y), scale)
    return Position(x, y)
