"""Configuration for the circuit extractor."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, Optional

DEFAULT_COMPONENT_ALIASES: Dict[str, str] = {
    'V': 'american voltage source',
    'R': 'american resistor',
    'resistor': 'american resistor',
    'L': 'cute inductor',
    'C': 'capacitor',
    'I': 'european current source',
    'current source': 'european current source',
    'voltage source': 'american voltage source',
}

DEFAULT_NODE_TYPE_ALIASES: Dict[str, str] = {
    '*': 'circ',
    'o': 'ocirc',
}

DEFAULT_LABEL_POSITIONS: Dict[str, str] = {
    'above': 'north',
    'below': 'south',
    'left': 'west',
    'right': 'east',
}

# centimetres to output units
DEFAULT_SCALE_FACTOR = 37.795


@dataclass
class ExtractorConfig:
    scale_factor: float = DEFAULT_SCALE_FACTOR
    label_distance: str = '0.12cm'
    wire_direction: str = '-|'
    component_aliases: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COMPONENT_ALIASES))
    node_type_aliases: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_NODE_TYPE_ALIASES))
    label_positions: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LABEL_POSITIONS))

    def canonical_name(self, type_key: str) -> str:
        return self.component_aliases.get(type_key, type_key)

    def label_position(self, key: str) -> str:
        return self.label_positions.get(key, key)


_EXTRACTOR_CONFIG = ExtractorConfig()


def get_extractor_config() -> ExtractorConfig:
    return copy.deepcopy(_EXTRACTOR_CONFIG)


def set_extractor_config(config: ExtractorConfig) -> None:
    global _EXTRACTOR_CONFIG
    _EXTRACTOR_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[ExtractorConfig]) -> ExtractorConfig:
    return config if config is not None else get_extractor_config()
