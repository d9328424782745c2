#!/usr/bin/env python3
"""
PowBench: Solve/Check Timing for kctfpow

Measures how long the sequential work function takes at a given
difficulty, and how much cheaper the kCTF unwinding check is.

Usage:
    powbench [--difficulty N] [--iterations N] [--output FILE]
"""

from __future__ import annotations
import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, Tuple

# Add paths
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from kctfpow import generate, solve, check, solve_kctf, check_kctf, DEFAULT_PARAMS


def benchmark(func: Callable, iterations: int) -> Tuple[float, float]:
    """
    Benchmark a function.
    Returns (total_time, time_per_iteration) in seconds.
    """
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    end = time.perf_counter()

    total = end - start
    return total, total / iterations


def run(difficulty: int, iterations: int) -> Dict[str, Any]:
    """Time solve, check and check_kctf on one random challenge."""
    challenge = generate(difficulty)
    solution = solve(challenge)
    kctf_solution = solve_kctf(challenge)

    _, solve_s = benchmark(lambda: solve(challenge), iterations)
    _, check_s = benchmark(lambda: check(challenge, solution), iterations)
    _, unwind_s = benchmark(lambda: check_kctf(challenge, kctf_solution), iterations)

    return {
        'challenge': str(challenge),
        'difficulty': difficulty,
        'iterations': iterations,
        'solve_ms': solve_s * 1e3,
        'check_ms': check_s * 1e3,
        'check_kctf_ms': unwind_s * 1e3,
        'ms_per_round': solve_s * 1e3 / difficulty if difficulty else 0.0,
    }


def main():
    parser = argparse.ArgumentParser(description='kctfpow benchmark')
    parser.add_argument('--difficulty', '-d', type=int, default=DEFAULT_PARAMS.default_difficulty)
    parser.add_argument('--iterations', '-n', type=int, default=3)
    parser.add_argument('--output', '-o', type=str, help='Output JSON file')
    args = parser.parse_args()

    print("=" * 60)
    print(f"Difficulty {args.difficulty}, {args.iterations} iterations")
    print("=" * 60)

    report = run(args.difficulty, args.iterations)

    print(f"  solve      : {report['solve_ms']:10.2f} ms")
    print(f"  check      : {report['check_ms']:10.2f} ms")
    print(f"  check_kctf : {report['check_kctf_ms']:10.2f} ms")
    print(f"  per round  : {report['ms_per_round']:10.4f} ms")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2)
        print(f"\nReport saved to: {args.output}")

    return 0


if __name__ == '__main__':
    exit(main())
