from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Reproducibility
    global_seed: int = Field(default=1337)

    # Evaluation
    roundtrip_vectors: int = Field(default=1000, ge=1)
    avalanche_trials: int = Field(default=200, ge=1)

    # Benchmarks
    benchmark_revs: int = Field(default=10000, ge=1)
    benchmark_iterations: int = Field(default=5, ge=1, le=100)
    benchmark_warmup: int = Field(default=3, ge=0, le=100)

    # Logging
    log_level: str = Field(default="INFO")

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("SPECK_ROUNDTRIP_VECTORS", "1000")),
        avalanche_trials=int(os.getenv("SPECK_AVALANCHE_TRIALS", "200")),
        benchmark_revs=int(os.getenv("SPECK_BENCH_REVS", "10000")),
        benchmark_iterations=int(os.getenv("SPECK_BENCH_ITERATIONS", "5")),
        benchmark_warmup=int(os.getenv("SPECK_BENCH_WARMUP", "3")),
        log_level=os.getenv("SPECK_LOG_LEVEL", "INFO").strip().upper(),
        runs_dir=os.getenv("SPECK_RUNS_DIR", "runs"),
    )
