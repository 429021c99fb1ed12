from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def as_dict(self):
        return {'x': self.x, 'y': self.y}


ORIGIN = Position(0.0, 0.0)


# Tokens produced by the lexer. Compound tokens keep their raw source text.

@dataclass(frozen=True)
class Coordinate:
    raw_x: str
    raw_y: str


@dataclass(frozen=True)
class WireMarker:
    raw: str = '--'


@dataclass(frozen=True)
class NodeSpec:
    raw: str


@dataclass(frozen=True)
class PathSpec:
    raw: str


Token = Union[Coordinate, WireMarker, NodeSpec, PathSpec]


@dataclass
class Label:
    """Component label.

    Path labels only carry ``value`` and ``distance``; node labels also
    carry ``anchor`` and ``position``.
    """

    value: str
    distance: str
    anchor: Optional[str] = None
    position: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.value and self.position in (None, 'default')

    def for_path(self) -> "Label":
        return Label(self.value, self.distance)


@dataclass
class Node:
    id: str
    position: Position
    label: Optional[Label] = None


@dataclass
class WireSegment:
    end_point: Position
    routing: str


@dataclass
class Wire:
    start: Position
    segments: List[WireSegment] = field(default_factory=list)

    @property
    def end(self) -> Position:
        return self.segments[-1].end_point


@dataclass
class Path:
    id: str
    start: Position
    end: Position
    label: Label


Element = Union[Node, Wire, Path]


@dataclass
class Circuit:
    elements: List[Element] = field(default_factory=list)

    def append(self, element: Element) -> None:
        self.elements.append(element)

    def of_kind(self, kind: type) -> List[Element]:
        return [el for el in self.elements if isinstance(el, kind)]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)
