"""CLI entry point for Speck roundtrip verification, avalanche and timing runs.

Usage:
    python scripts/run_benchmarks.py                                  # every setup
    python scripts/run_benchmarks.py --setups 32/64 128/256           # subset
    python scripts/run_benchmarks.py --revs 1000 --iterations 2       # quick test
    python scripts/run_benchmarks.py --skip-timing --save             # verify + save JSON

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from speckcipher.cipher.setups import iter_setups, resolve_config
from speckcipher.config import load_settings
from speckcipher.evaluation.avalanche import evaluate_setup
from speckcipher.evaluation.benchmark import benchmark_setup
from speckcipher.evaluation.roundtrip import run_roundtrip_tests
from speckcipher.utils.repro import make_run_dir, set_global_seed, write_json


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def _parse_setup(text: str) -> Tuple[int, int]:
    """Parse ``BLOCK/KEY`` (e.g. ``64/128``) into a validated pair."""
    try:
        block_s, key_s = text.split("/", 1)
        block_size, key_size = int(block_s), int(key_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected BLOCK/KEY, got {text!r}")
    try:
        resolve_config(block_size, key_size)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))
    return block_size, key_size


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Speck roundtrip, avalanche and timing benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python scripts/run_benchmarks.py --setups 32/64              # one setup\n"
            "  python scripts/run_benchmarks.py --skip-timing --save        # verify only\n"
        ),
    )

    parser.add_argument(
        "--setups", nargs="+", type=_parse_setup, default=None, metavar="BLOCK/KEY",
        help="Setups to run (default: all ten)",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Base random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--roundtrip-vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Roundtrip test vectors per setup (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--avalanche-trials", type=int, default=settings.avalanche_trials,
        help=f"Avalanche trials per setup (default: {settings.avalanche_trials})",
    )
    parser.add_argument(
        "--revs", type=int, default=settings.benchmark_revs,
        help=f"Calls per timed iteration (default: {settings.benchmark_revs})",
    )
    parser.add_argument(
        "--iterations", type=int, default=settings.benchmark_iterations,
        help=f"Timed iterations per operation (default: {settings.benchmark_iterations})",
    )
    parser.add_argument(
        "--warmup", type=int, default=settings.benchmark_warmup,
        help=f"Discarded warmup iterations (default: {settings.benchmark_warmup})",
    )
    parser.add_argument(
        "--skip-avalanche", action="store_true",
        help="Skip avalanche measurements",
    )
    parser.add_argument(
        "--skip-timing", action="store_true",
        help="Skip timing benchmarks",
    )
    parser.add_argument(
        "--save", action="store_true",
        help=f"Write JSON results under {settings.runs_dir}/",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    set_global_seed(args.seed)
    setups: List[Tuple[int, int]] = args.setups or list(iter_setups())

    roundtrip, avalanche, timing = [], [], []
    for idx, (block_size, key_size) in enumerate(setups):
        _cli_progress(f"Speck{block_size}/{key_size}", idx, len(setups))

        rt = run_roundtrip_tests(
            block_size, key_size, num_vectors=args.roundtrip_vectors, seed=args.seed,
        )
        roundtrip.append(rt)
        print(rt.summary())

        if not args.skip_avalanche:
            avalanche.append(evaluate_setup(
                block_size, key_size, trials=args.avalanche_trials, seed=args.seed,
            ))

        if not args.skip_timing:
            bench = benchmark_setup(
                block_size, key_size,
                revs=args.revs, iterations=args.iterations, warmup=args.warmup, seed=args.seed,
            )
            timing.append(bench)
            print(f"  {bench.summary()}")

    failed = [r for r in roundtrip if not r.is_perfect]
    print(f"\nRoundtrip: {len(roundtrip) - len(failed)}/{len(roundtrip)} setups passed.")

    if args.save:
        paths = make_run_dir(Path(settings.project_root) / settings.runs_dir, "speck")
        write_json(paths.roundtrip_json, [r.to_dict() for r in roundtrip])
        if avalanche:
            write_json(paths.avalanche_json, avalanche)
        if timing:
            write_json(paths.benchmark_json, [b.to_dict() for b in timing])
        print(f"All results saved to: {paths.run_dir}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
