"""Interchange JSON for extracted circuits."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Union

from .ast import Circuit, Element, Label, Node, Path, Wire


def label_to_dict(label: Label) -> Dict[str, Any]:
    out: Dict[str, Any] = {'value': label.value}
    if label.anchor is not None:
        out['anchor'] = label.anchor
    if label.position is not None:
        out['position'] = label.position
    out['distance'] = label.distance
    return out


def element_to_dict(element: Element) -> Dict[str, Any]:
    if isinstance(element, Node):
        out: Dict[str, Any] = {
            'type': 'node',
            'id': element.id,
            'position': element.position.as_dict(),
        }
        if element.label is not None:
            out['label'] = label_to_dict(element.label)
        return out
    if isinstance(element, Wire):
        return {
            'type': 'wire',
            'start': element.start.as_dict(),
            'segments': [
                {'endPoint': seg.end_point.as_dict(), 'direction': seg.routing}
                for seg in element.segments
            ],
        }
    if isinstance(element, Path):
        return {
            'type': 'path',
            'id': element.id,
            'start': element.start.as_dict(),
            'end': element.end.as_dict(),
            'label': label_to_dict(element.label),
        }
    raise ValueError(f"unknown element {element!r}")


def circuit_to_list(circuit: Union[Circuit, Iterable[Element]]) -> List[Dict[str, Any]]:
    return [element_to_dict(el) for el in circuit]


def circuit_to_json(circuit: Union[Circuit, Iterable[Element]], indent: int = 4) -> str:
    return json.dumps(circuit_to_list(circuit), indent=indent)


def error_to_json(message: str, indent: int = 4) -> str:
    return json.dumps({'error': message}, indent=indent)
