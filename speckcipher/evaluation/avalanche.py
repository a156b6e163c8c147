"""Avalanche measurements for Speck setups.

Flips one plaintext or key bit at a time and records the fraction of
ciphertext bits that change. A well-diffusing cipher sits near 0.5.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

import numpy as np

from speckcipher.cipher.setups import resolve_config
from speckcipher.cipher.speck import Speck

logger = logging.getLogger(__name__)


def _hamming_distance(a: int, b: int) -> int:
    return (a ^ b).bit_count()


def _flip_bit(value: int, bit_index: int, width: int) -> int:
    if bit_index < 0 or bit_index >= width:
        raise IndexError("bit_index out of range")
    return value ^ (1 << bit_index)


@dataclass
class AvalancheStats:
    input_type: str             # "plaintext" or "key"
    trials: int
    mean: float
    std: float
    min: float
    max: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _stats(input_type: str, fractions: List[float]) -> AvalancheStats:
    arr = np.asarray(fractions, dtype=np.float64)
    if arr.size == 0:
        return AvalancheStats(input_type, 0, 0.0, 0.0, 0.0, 0.0)
    return AvalancheStats(
        input_type=input_type,
        trials=int(arr.size),
        mean=round(float(arr.mean()), 6),
        std=round(float(arr.std()), 6),
        min=round(float(arr.min()), 6),
        max=round(float(arr.max()), 6),
    )


def avalanche_plaintext(
    block_size: int,
    key_size: int,
    *,
    trials: int = 200,
    flips_per_trial: int = 1,
    seed: int = 1337,
) -> AvalancheStats:
    resolve_config(block_size, key_size)
    rng = random.Random(seed)
    fractions: List[float] = []
    for _ in range(trials):
        cipher = Speck(rng.getrandbits(key_size), key_size, block_size)
        pt = rng.getrandbits(block_size)
        ct = cipher.encrypt(pt)
        for _ in range(flips_per_trial):
            pt2 = _flip_bit(pt, rng.randrange(0, block_size), block_size)
            ct2 = cipher.encrypt(pt2)
            fractions.append(_hamming_distance(ct, ct2) / block_size)
    return _stats("plaintext", fractions)


def avalanche_key(
    block_size: int,
    key_size: int,
    *,
    trials: int = 200,
    flips_per_trial: int = 1,
    seed: int = 1337,
) -> AvalancheStats:
    resolve_config(block_size, key_size)
    rng = random.Random(seed + 1)
    fractions: List[float] = []
    for _ in range(trials):
        key = rng.getrandbits(key_size)
        pt = rng.getrandbits(block_size)
        ct = Speck(key, key_size, block_size).encrypt(pt)
        for _ in range(flips_per_trial):
            key2 = _flip_bit(key, rng.randrange(0, key_size), key_size)
            ct2 = Speck(key2, key_size, block_size).encrypt(pt)
            fractions.append(_hamming_distance(ct, ct2) / block_size)
    return _stats("key", fractions)


def score_avalanche(mean: float) -> float:
    # 1.0 is perfect (0.5), 0.0 is terrible (0 or 1)
    return max(0.0, 1.0 - abs(mean - 0.5) / 0.5)


def evaluate_setup(block_size: int, key_size: int, *, trials: int = 200, seed: int = 1337) -> Dict[str, object]:
    config = resolve_config(block_size, key_size)
    pt = avalanche_plaintext(block_size, key_size, trials=trials, seed=seed)
    kk = avalanche_key(block_size, key_size, trials=trials, seed=seed)
    scores = {
        "plaintext_avalanche": score_avalanche(pt.mean),
        "key_avalanche": score_avalanche(kk.mean),
    }
    scores["overall"] = (scores["plaintext_avalanche"] + scores["key_avalanche"]) / 2.0
    logger.info(
        "%s avalanche: plaintext=%.4f key=%.4f",
        config.name, pt.mean, kk.mean,
    )
    return {
        "setup": config.name,
        "block_size": block_size,
        "key_size": key_size,
        "rounds": config.rounds,
        "plaintext_avalanche": pt.to_dict(),
        "key_avalanche": kk.to_dict(),
        "scores": scores,
    }
