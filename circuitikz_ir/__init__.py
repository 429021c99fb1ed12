from .ast import (
    Circuit,
    Coordinate,
    Label,
    Node,
    NodeSpec,
    Path,
    PathSpec,
    Position,
    Wire,
    WireMarker,
    WireSegment,
)
from .scanner import UnterminatedDelimiter, match_delimiter, split_options, strip_outer_wrap
from .connectors import ConnectorInfo, classify_connector
from .labels import extract_label
from .lexer import tokenize
from .config import ExtractorConfig, get_extractor_config, set_extractor_config
from .interpreter import ConversionResult, Diagnostics, InterpreterContext, extract_elements, process_tokens
from .document import NoCircuitBlockError, convert_document, document_commands
from .serialize import circuit_to_json, element_to_dict, error_to_json
from .printer import format_tokens

__all__ = [
    'Circuit',
    'Coordinate',
    'Label',
    'Node',
    'NodeSpec',
    'Path',
    'PathSpec',
    'Position',
    'Wire',
    'WireMarker',
    'WireSegment',
    'UnterminatedDelimiter',
    'match_delimiter',
    'split_options',
    'strip_outer_wrap',
    'ConnectorInfo',
    'classify_connector',
    'extract_label',
    'tokenize',
    'ExtractorConfig',
    'get_extractor_config',
    'set_extractor_config',
    'ConversionResult',
    'Diagnostics',
    'InterpreterContext',
    'extract_elements',
    'process_tokens',
    'NoCircuitBlockError',
    'convert_document',
    'document_commands',
    'circuit_to_json',
    'element_to_dict',
    'error_to_json',
    'format_tokens',
]
