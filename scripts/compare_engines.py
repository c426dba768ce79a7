"""Demo: compare LSD and MSD work on the same dataset across several bases."""

import sys

from radix_trace.api import run_both
from radix_trace.dataset import generate_dataset
from radix_trace.render import format_time
from radix_trace.run_types import Algorithm

BASES = [2, 4, 10, 16, 256]


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42
    values = generate_dataset(40, 6, seed)
    print("=" * 60)
    print(f"DATASET (seed={seed}, {len(values)} values):")
    print(values)
    print("=" * 60)
    print(f"  {'Base':>6} {'LSD passes':>11} {'LSD ops':>9} {'MSD calls':>10} {'MSD ops':>9}")
    for base in BASES:
        results = run_both(values, base)
        lsd, msd = results[Algorithm.LSD], results[Algorithm.MSD]
        assert lsd.sorted == msd.sorted
        print(
            f"  {base:>6} {lsd.stats.passes:>11} {lsd.stats.operations:>9}"
            f" {msd.stats.recursive_calls:>10} {msd.stats.operations:>9}"
            f"   ({format_time(lsd.stats.time_ms)} / {format_time(msd.stats.time_ms)})"
        )


if __name__ == "__main__":
    main()
