import pytest

from entroguess.config import SolverConfig
from entroguess.engine import ConfigError


def test_defaults():
    c = SolverConfig()
    assert c.word_length == 5 and c.prefix == "" and c.fixed == 0
    assert SolverConfig(word_length=4, prefix="ab").fixed == 2


@pytest.mark.parametrize("kwargs", [
    {"word_length": 0},
    {"word_length": 3, "prefix": "abcd"},
    {"prefix": "1"},
    {"top": 0},
    {"pool": "everything"},
    {"workers": 0},
])
def test_invalid_config(kwargs):
    with pytest.raises(ConfigError):
        SolverConfig(**kwargs)
