"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized test vectors per Speck setup and verifies that
decryption inverts encryption (and vice versa) for every vector, and that
encryption is deterministic.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

from speckcipher.cipher.setups import iter_setups, resolve_config
from speckcipher.cipher.speck import Speck

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one setup."""
    setup_name: str
    block_size: int
    key_size: int
    rounds: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.setup_name}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _hex(value: int, bits: int) -> str:
    return f"{value:0{bits // 4}x}"


def run_roundtrip_tests(
    block_size: int,
    key_size: int,
    *,
    num_vectors: int = 1000,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification across many random (key, plaintext) pairs.

    Args:
        block_size: Speck block size in bits.
        key_size: Speck key size in bits.
        num_vectors: Number of random vectors; each builds a fresh cipher.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.

    Raises:
        InvalidBlockSizeError, InvalidKeySizeError: unsupported setup.
    """
    config = resolve_config(block_size, key_size)

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        key = rng.getrandbits(key_size)
        pt = rng.getrandbits(block_size)
        ct = pt2 = None

        try:
            cipher = Speck(key, key_size, block_size)
            ct = cipher.encrypt(pt)
            pt2 = cipher.decrypt(ct)
            ok = (
                pt2 == pt
                and cipher.encrypt(pt) == ct
                and cipher.encrypt(cipher.decrypt(pt)) == pt
            )
            error = None
        except Exception as exc:
            ok = False
            error = str(exc)

        if ok:
            passed += 1
            continue

        failed += 1
        if len(failures) < max_failures_recorded:
            failures.append(RoundtripFailure(
                vector_index=i,
                plaintext_hex=_hex(pt, block_size),
                key_hex=_hex(key, key_size),
                ciphertext_hex="<error>" if ct is None else _hex(ct, block_size),
                decrypted_hex="<error>" if pt2 is None else _hex(pt2, block_size),
                error=error,
            ))

    elapsed = time.perf_counter() - start

    result = RoundtripResult(
        setup_name=config.name,
        block_size=block_size,
        key_size=key_size,
        rounds=config.rounds,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    if result.is_perfect:
        logger.info(result.summary())
    else:
        logger.warning(result.summary())
    return result


def run_all_setups(
    *,
    num_vectors: int = 1000,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every supported (block_size, key_size) pair.

    Args:
        num_vectors: Number of test vectors per setup.
        seed: Random seed for reproducibility.
        progress_callback: Optional callback(setup_name, current_index, total).

    Returns:
        List of RoundtripResult in table order.
    """
    setups = list(iter_setups())
    results: List[RoundtripResult] = []

    for idx, (block_size, key_size) in enumerate(setups):
        if progress_callback:
            progress_callback(f"Speck{block_size}/{key_size}", idx, len(setups))
        results.append(run_roundtrip_tests(
            block_size,
            key_size,
            num_vectors=num_vectors,
            seed=seed,
        ))

    return results
