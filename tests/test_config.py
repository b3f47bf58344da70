import pytest

from knucklebones_states.config import EnumerationConfig, preset_enumeration, run_enumeration
from knucklebones_states.hands import generate_hands
from knucklebones_states.pairs import HandPairTable
from knucklebones_states.states import count_states


def test_presets():
    assert preset_enumeration("default").method == "suffix"
    assert preset_enumeration("DEFAULT").workers == 1
    assert preset_enumeration("parallel").workers >= 1
    assert preset_enumeration("exhaustive").method == "exhaustive"
    assert preset_enumeration("check").method == "closed-form"
    with pytest.raises(ValueError):
        preset_enumeration("turbo")


@pytest.mark.parametrize(
    "cfg",
    [
        EnumerationConfig(method="brute"),
        EnumerationConfig(workers=0),
        EnumerationConfig(chunk_size=0),
        EnumerationConfig(method="exhaustive", workers=4),
    ],
)
def test_invalid_configs(cfg):
    with pytest.raises(ValueError):
        cfg.validate()


def test_methods_agree_on_small_table():
    table = HandPairTable.build(generate_hands()[:12])
    expected = count_states(table.pairs)
    for method in ("suffix", "exhaustive", "closed-form"):
        assert run_enumeration(table, EnumerationConfig(method=method)) == expected
    parallel = EnumerationConfig(method="suffix", workers=2, chunk_size=7)
    assert run_enumeration(table, parallel) == expected
