"""CLI runner for the Knucklebones state enumerator.

Usage examples:
- Default report: ``python -m knucklebones_states.runner``
- Parallel count with timings: ``python -m knucklebones_states.runner --preset parallel --verbose``
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional, TextIO

from .config import METHODS, EnumerationConfig, preset_enumeration, run_enumeration
from .hands import generate_hands
from .pairs import HandPairTable, generate_hand_pairs
from .states import StateCounts


def _log(message: str, stream: TextIO, verbose: bool) -> None:
    if not verbose:
        return
    print(message, file=stream)
    stream.flush()


def format_report(hand_count: int, pair_count: int, counts: StateCounts) -> List[str]:
    return [
        f"Hands: {hand_count}",
        f"Hand pairs: {pair_count}",
        f"Intermediate states: {counts.intermediate}",
        f"Final states: {counts.final}",
        f"Total: {counts.total}",
    ]


def run(
    cfg: EnumerationConfig,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    verbose: bool = False,
) -> StateCounts:
    """Build hands and pairs, count states and print the report."""

    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    start = time.monotonic()
    hands = generate_hands()
    print(f"Hands: {len(hands)}", file=stdout)
    _log(f"hands built in {(time.monotonic() - start) * 1000:.1f} ms", stderr, verbose)

    start = time.monotonic()
    table = HandPairTable(generate_hand_pairs(hands))
    print(f"Hand pairs: {len(table)}", file=stdout)
    _log(f"hand pairs built in {(time.monotonic() - start) * 1000:.1f} ms", stderr, verbose)

    start = time.monotonic()
    _log(f"counting states: method={cfg.method} workers={cfg.workers} preset={cfg.preset}", stderr, verbose)
    counts = run_enumeration(table, cfg)
    _log(
        f"states counted in {time.monotonic() - start:.2f} s (invalid={counts.invalid})",
        stderr,
        verbose,
    )
    for line in format_report(len(hands), len(table), counts)[2:]:
        print(line, file=stdout)
    return counts


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count Knucklebones intermediate and final states")
    parser.add_argument("--preset", choices=["default", "parallel", "exhaustive", "check"], default="default")
    parser.add_argument("--method", choices=list(METHODS), default=None, help="Override the preset's counting method")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes for the suffix method")
    parser.add_argument("--chunk-size", type=int, default=None, help="Outer indices per worker task")
    parser.add_argument("--verbose", action="store_true", help="Print stage timings to stderr")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EnumerationConfig:
    cfg = preset_enumeration(args.preset)
    if args.method is not None:
        cfg.method = args.method
        cfg.preset = "custom"
    if args.workers is not None:
        cfg.workers = args.workers
        cfg.preset = "custom"
    if args.chunk_size is not None:
        cfg.chunk_size = args.chunk_size
        cfg.preset = "custom"
    return cfg.validate()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        cfg = build_config(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        raise SystemExit(1)
    run(cfg, verbose=args.verbose)


if __name__ == "__main__":
    main()
