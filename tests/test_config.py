from circuitikz_ir.config import ExtractorConfig, get_extractor_config, set_extractor_config
from circuitikz_ir.interpreter import extract_elements


def test_get_returns_independent_copies():
    config = get_extractor_config()
    config.component_aliases['R'] = 'european resistor'
    assert get_extractor_config().component_aliases['R'] == 'american resistor'


def test_set_config_changes_default_pipeline():
    original = get_extractor_config()
    try:
        custom = ExtractorConfig(label_distance='0.3cm')
        custom.component_aliases['R'] = 'european resistor'
        set_extractor_config(custom)
        (path,) = extract_elements(['(0,0) to[R] (1,0)']).circuit.elements
        assert path.id == 'path_european-resistor'
        assert path.label.distance == '0.3cm'
    finally:
        set_extractor_config(original)


def test_label_position_passes_unknown_keys_through():
    config = ExtractorConfig()
    assert config.label_position('below') == 'south'
    assert config.label_position('above left') == 'above left'
