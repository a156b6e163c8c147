import sys
from pathlib import Path

import pytest

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from speckcipher.config import load_settings
from speckcipher.evaluation.avalanche import (
    _flip_bit,
    _hamming_distance,
    avalanche_key,
    avalanche_plaintext,
    evaluate_setup,
    score_avalanche,
)
from speckcipher.evaluation.benchmark import benchmark_setup
from speckcipher.utils.repro import make_run_dir, read_json, write_json


def test_hamming_and_flip():
    assert _hamming_distance(0b1010, 0b0110) == 2
    assert _flip_bit(0, 3, 8) == 8
    with pytest.raises(IndexError):
        _flip_bit(0, 8, 8)


@pytest.mark.parametrize("block_size,key_size", [(32, 64), (128, 128)])
def test_avalanche_near_half(block_size, key_size):
    pt = avalanche_plaintext(block_size, key_size, trials=100, seed=3)
    kk = avalanche_key(block_size, key_size, trials=100, seed=3)
    assert pt.trials == 100 and kk.trials == 100
    assert 0.35 < pt.mean < 0.65
    assert 0.35 < kk.mean < 0.65
    assert 0.0 <= pt.min <= pt.mean <= pt.max <= 1.0


def test_score_avalanche():
    assert score_avalanche(0.5) == 1.0
    assert score_avalanche(0.0) == 0.0
    assert score_avalanche(1.0) == 0.0


def test_evaluate_setup_shape():
    report = evaluate_setup(64, 96, trials=20, seed=11)
    assert report["setup"] == "Speck64/96"
    assert report["rounds"] == 26
    assert set(report["scores"]) == {"plaintext_avalanche", "key_avalanche", "overall"}
    assert report["plaintext_avalanche"]["input_type"] == "plaintext"


def test_benchmark_setup_records_each_operation():
    result = benchmark_setup(32, 64, revs=5, iterations=2, warmup=1)
    assert [t.operation for t in result.timings] == ["construct", "encrypt", "decrypt"]
    for t in result.timings:
        assert len(t.samples_us) == 2
        assert t.mean_us > 0
        assert t.best_us <= t.mean_us
    assert result.timing("encrypt").revs == 5
    with pytest.raises(KeyError):
        result.timing("sign")
    assert result.to_dict()["setup_name"] == "Speck32/64"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SPECK_ROUNDTRIP_VECTORS", "25")
    monkeypatch.setenv("SPECK_LOG_LEVEL", "debug")
    monkeypatch.setenv("GLOBAL_SEED", "7")
    load_settings.cache_clear()
    try:
        settings = load_settings()
        assert settings.roundtrip_vectors == 25
        assert settings.log_level == "DEBUG"
        assert settings.global_seed == 7
        assert settings.benchmark_iterations == 5
    finally:
        load_settings.cache_clear()


def test_run_dir_json_roundtrip(tmp_path):
    paths = make_run_dir(tmp_path, "speck run/1")
    assert paths.run_dir.exists()
    assert paths.run_dir.name.endswith("speck_run_1")
    write_json(paths.roundtrip_json, {"passed": 3})
    assert read_json(paths.roundtrip_json) == {"passed": 3}
