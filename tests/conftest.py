import pytest

from src.config.dfa_config import dfa_config


@pytest.fixture(autouse=True)
def restore_config():
    yield
    dfa_config.reset_defaults()
