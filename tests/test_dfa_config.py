from src.config.dfa_config import DFAConfig, dfa_config


def test_singleton():
    assert DFAConfig() is dfa_config


def test_defaults():
    assert dfa_config.output_dir == "output/dfa_data"
    assert dfa_config.image_dir == "output/DFA"
    assert dfa_config.image_format == "png"
    assert not dfa_config.is_trap_state_shown()


def test_trap_toggle():
    dfa_config.enable_trap_state()
    assert dfa_config.is_trap_state_shown()
    dfa_config.disable_trap_state()
    assert not dfa_config.is_trap_state_shown()


def test_second_construction_keeps_settings():
    dfa_config.output_dir = "elsewhere"
    DFAConfig()
    assert dfa_config.output_dir == "elsewhere"
