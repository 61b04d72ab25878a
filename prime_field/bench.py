#!/usr/bin/env python3
"""Time the addition and multiplication variants over a shared operand stream.

Each group runs its variants over the same n_operations consecutive operand
pairs, repeating n_samples times, and reports per-operation cost.

Run with: prime-field-bench --samples 50 --operations 1000 --seed 7
"""

import argparse
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from prime_field.fast_add import add_fast, add_winterfell
from prime_field.fast_mul import mul_reduce159, mul_reduce_montgomery
from prime_field.field import add, mul
from prime_field.sampling import operand_pairs, random_elements

BinaryOp = Callable[[int, int], int]

# "baseline" is the raw machine operation without any reduction
ADD_VARIANTS: Dict[str, BinaryOp] = {
    "baseline": lambda x, y: x + y,
    "mod": add,
    "fast": add_fast,
    "winterfell": add_winterfell,
}

MUL_VARIANTS: Dict[str, BinaryOp] = {
    "baseline": lambda x, y: x * y,
    "mod": mul,
    "reduce159": mul_reduce159,
    "reduce_montgomery": mul_reduce_montgomery,
}

GROUPS: Dict[str, Dict[str, BinaryOp]] = {
    "add": ADD_VARIANTS,
    "mul": MUL_VARIANTS,
}


# --- Configuration ---

@dataclass
class BenchConfig:
    """Benchmark parameters.

    Attributes:
        n_samples: Timed repetitions per variant
        n_operations: Operand pairs per repetition
        seed: Seed for the operand stream; None draws fresh entropy
        groups: Which groups to run ("add", "mul")
    """
    n_samples: int = 100
    n_operations: int = 1_000
    seed: Optional[int] = None
    groups: Tuple[str, ...] = ("add", "mul")

    def __post_init__(self) -> None:
        if self.n_samples <= 0:
            raise ValueError(f"n_samples must be positive, got {self.n_samples}")
        if self.n_operations <= 0:
            raise ValueError(f"n_operations must be positive, got {self.n_operations}")
        unknown = [g for g in self.groups if g not in GROUPS]
        if unknown:
            raise ValueError(f"Unknown benchmark groups: {unknown}")


@dataclass
class BenchResult:
    """Timings of one variant; samples are seconds per repetition."""
    group: str
    name: str
    n_operations: int
    samples: List[float] = field(default_factory=list)

    @property
    def mean(self) -> float:
        return sum(self.samples) / len(self.samples) if self.samples else 0.0

    @property
    def best(self) -> float:
        return min(self.samples) if self.samples else 0.0

    @property
    def ns_per_op(self) -> float:
        return self.mean / self.n_operations * 1e9


# --- Runner ---

def time_variant(op: BinaryOp, pairs: Sequence[Tuple[int, int]], n_samples: int) -> List[float]:
    """Time n_samples passes of op over every operand pair."""
    samples = []
    for _ in range(n_samples):
        start = time.perf_counter()
        for x, y in pairs:
            op(x, y)
        samples.append(time.perf_counter() - start)
    return samples


def run_benchmarks(config: BenchConfig) -> List[BenchResult]:
    """Run every variant of the configured groups over one operand stream."""
    rng = np.random.default_rng(config.seed)
    operands = random_elements(config.n_operations, rng)
    pairs = list(operand_pairs(operands))

    results = []
    for group in config.groups:
        for name, op in GROUPS[group].items():
            samples = time_variant(op, pairs, config.n_samples)
            results.append(BenchResult(group, name, config.n_operations, samples))
    return results


def format_results(results: List[BenchResult]) -> str:
    """Render results as a fixed-width table."""
    lines = [
        f"{'Benchmark':<30} {'Mean (s)':<12} {'Best (s)':<12} {'ns/op':<10}",
        "-" * 66,
    ]
    for r in results:
        label = f"{r.group}/{r.name}/{r.n_operations}"
        lines.append(f"{label:<30} {r.mean:<12.6f} {r.best:<12.6f} {r.ns_per_op:<10.1f}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Benchmark Goldilocks field addition and multiplication variants'
    )
    parser.add_argument(
        '--samples',
        type=int,
        default=100,
        help='Timed repetitions per variant'
    )
    parser.add_argument(
        '--operations',
        type=int,
        default=1_000,
        help='Operand pairs per repetition'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the operand stream'
    )
    parser.add_argument(
        '--group',
        action='append',
        choices=sorted(GROUPS),
        help='Group to run (repeatable, default: all)'
    )

    args = parser.parse_args(argv)

    try:
        config = BenchConfig(
            n_samples=args.samples,
            n_operations=args.operations,
            seed=args.seed,
            groups=tuple(args.group) if args.group else tuple(GROUPS),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Running {config.n_samples} samples of {config.n_operations} operations...")
    results = run_benchmarks(config)
    print()
    print(format_results(results))


if __name__ == '__main__':
    main()
