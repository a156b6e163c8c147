"""Evaluation tooling for the Speck engine.

Provides roundtrip verification, avalanche statistics and timing benchmarks.

Research / education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_setups
from .avalanche import AvalancheStats, avalanche_key, avalanche_plaintext, evaluate_setup, score_avalanche
from .benchmark import BenchmarkResult, OperationTiming, benchmark_setup

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_setups",
    "AvalancheStats",
    "avalanche_key",
    "avalanche_plaintext",
    "evaluate_setup",
    "score_avalanche",
    "BenchmarkResult",
    "OperationTiming",
    "benchmark_setup",
]
