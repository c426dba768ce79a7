"""Command-line front end: run, dump, or replay radix sort traces."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import constants
from .api import run_demo, run_selected
from .dataset import clamp
from .digits import max_digit_count
from .playback import Frame, TracePlayer
from .render import render_step, render_trace
from .run_types import Algorithm, DemoConfig
from .trace_types import RunResult

logger = logging.getLogger(__name__)

BOTH = "both"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-trace",
        description="Trace LSD and MSD radix sort step by step",
    )
    parser.add_argument("values", nargs="*", type=int,
                        help="Values to sort (default: generate a dataset)")
    parser.add_argument("--algorithm", "-a", default=BOTH,
                        choices=[a.value for a in Algorithm] + [BOTH],
                        help="Engine to run (default: both)")
    parser.add_argument("--base", "-b", type=int, default=constants.DEFAULT_BASE,
                        help="Radix (default: 10)")
    parser.add_argument("--size", "-n", type=int,
                        default=constants.DEFAULT_DATASET_SIZE,
                        help="Generated dataset size (default: 12)")
    parser.add_argument("--digits", "-d", type=int,
                        default=constants.DEFAULT_DATASET_DIGITS,
                        help="Maximum digits per generated value (default: 4)")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Dataset seed (default: current time)")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON")
    parser.add_argument("--play", action="store_true",
                        help="Replay both traces in lockstep")
    parser.add_argument("--interval", type=int,
                        default=constants.DEFAULT_INTERVAL_MS,
                        help="Milliseconds between replayed steps (default: 1200)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-step engine detail")
    return parser


def _replay(results: dict[Algorithm, RunResult], width: int, interval_ms: int) -> None:
    player = TracePlayer(lsd=results.get(Algorithm.LSD), msd=results.get(Algorithm.MSD))

    def show(index: int, frame: Frame) -> None:
        print(f"═══ Step {index + 1} of {player.max_steps} ═══")
        for algorithm in frame:
            print(f"[{algorithm.value.upper()}]")
            print(render_step(results[algorithm], index, width))
        print()

    player.play(show, interval_ms=interval_ms)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DemoConfig(
        size=args.size,
        max_digits=args.digits,
        seed=args.seed,
        base=args.base,
        interval_ms=args.interval,
    )
    algorithm = None if args.algorithm == BOTH else Algorithm(args.algorithm)

    try:
        if config.interval_ms < 0:
            raise ValueError(f"--interval must be >= 0, got {config.interval_ms}")
        if args.values:
            values = list(args.values)
            logger.info("Running %s on %d values", args.algorithm, len(values))
            results = run_selected(values, algorithm, config.base)
            width = max_digit_count(values, config.base)
        else:
            results = run_demo(config, algorithm)
            values = list(next(iter(results.values())).initial_order)
            requested = clamp(
                config.max_digits,
                constants.DATASET_MIN_DIGITS,
                constants.DATASET_MAX_DIGITS,
            )
            width = max(max_digit_count(values, config.base), requested)
            if not args.json:
                print(f"No values provided. Using generated dataset: {values}\n")

        if args.json:
            payload = {a.value: r.to_dict() for a, r in results.items()}
            print(json.dumps(payload, indent=2))
        elif args.play:
            _replay(results, width, config.interval_ms)
        else:
            for chosen, result in results.items():
                print(f"═══ {chosen.value.upper()} ═══")
                print(render_trace(result, width))
                print()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
