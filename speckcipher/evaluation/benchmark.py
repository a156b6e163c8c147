"""Timing benchmarks for cipher construction, encryption and decryption.

Each operation runs ``warmup`` discarded iterations, then ``iterations``
timed iterations of ``revs`` repetitions each.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List

from speckcipher.cipher.setups import resolve_config
from speckcipher.cipher.speck import Speck

logger = logging.getLogger(__name__)


@dataclass
class OperationTiming:
    """Per-operation timings in microseconds per call."""
    operation: str
    revs: int
    iterations: int
    samples_us: List[float] = field(default_factory=list)

    @property
    def mean_us(self) -> float:
        return sum(self.samples_us) / len(self.samples_us) if self.samples_us else 0.0

    @property
    def best_us(self) -> float:
        return min(self.samples_us) if self.samples_us else 0.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["mean_us"] = round(self.mean_us, 4)
        d["best_us"] = round(self.best_us, 4)
        return d


@dataclass
class BenchmarkResult:
    setup_name: str
    block_size: int
    key_size: int
    rounds: int
    timings: List[OperationTiming] = field(default_factory=list)

    def timing(self, operation: str) -> OperationTiming:
        for t in self.timings:
            if t.operation == operation:
                return t
        raise KeyError(f"Unknown operation: {operation}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "setup_name": self.setup_name,
            "block_size": self.block_size,
            "key_size": self.key_size,
            "rounds": self.rounds,
            "timings": [t.to_dict() for t in self.timings],
        }

    def summary(self) -> str:
        parts = [f"{t.operation}={t.mean_us:.2f}us" for t in self.timings]
        return f"{self.setup_name}: " + ", ".join(parts)


def _time_operation(
    name: str,
    fn: Callable[[], object],
    *,
    revs: int,
    iterations: int,
    warmup: int,
) -> OperationTiming:
    timing = OperationTiming(operation=name, revs=revs, iterations=iterations)
    for i in range(warmup + iterations):
        start = time.perf_counter()
        for _ in range(revs):
            fn()
        elapsed = time.perf_counter() - start
        if i >= warmup:
            timing.samples_us.append(elapsed / revs * 1e6)
    return timing


def benchmark_setup(
    block_size: int,
    key_size: int,
    *,
    revs: int = 10000,
    iterations: int = 5,
    warmup: int = 3,
    seed: int = 1337,
) -> BenchmarkResult:
    """Time construction, encryption and decryption for one setup."""
    config = resolve_config(block_size, key_size)
    rng = random.Random(seed)
    key = rng.getrandbits(key_size)
    plaintext = rng.getrandbits(block_size)

    cipher = Speck(key, key_size, block_size)
    ciphertext = cipher.encrypt(plaintext)

    result = BenchmarkResult(
        setup_name=config.name,
        block_size=block_size,
        key_size=key_size,
        rounds=config.rounds,
    )
    opts = {"revs": revs, "iterations": iterations, "warmup": warmup}
    result.timings.append(
        _time_operation("construct", lambda: Speck(key, key_size, block_size), **opts)
    )
    result.timings.append(_time_operation("encrypt", lambda: cipher.encrypt(plaintext), **opts))
    result.timings.append(_time_operation("decrypt", lambda: cipher.decrypt(ciphertext), **opts))

    logger.info(result.summary())
    return result
