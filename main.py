"""Entry point for the Sorting Visualizer (headless).

Runs algorithms without pacing or rendering and prints the comparison report.

    python main.py                      # all algorithms, 50 random values
    python main.py --size 200 --seed 7
    python main.py --values 5,3,8,1 --algorithm merge
"""

import argparse
import asyncio
import logging

from sort_visualizer.core.algorithms import ALGORITHMS
from sort_visualizer.core.errors import SortVisualizerError
from sort_visualizer.schemas import VisualizerConfig
from sort_visualizer.services import VisualizerSession, compare_algorithms
from sort_visualizer.services.config_manager import load_preset


async def _no_wait(_seconds: float) -> None:
    return None


def build_session(args: argparse.Namespace) -> VisualizerSession:
    """Create a session from a preset and/or command-line overrides."""
    config = load_preset(args.preset) if args.preset else VisualizerConfig()
    overrides = {
        k: v
        for k, v in (
            ("array_size", args.size),
            ("seed", args.seed),
            ("algorithm", args.algorithm),
        )
        if v is not None
    }
    if overrides:
        config = config.updated(**overrides)
    session = VisualizerSession(config, sleep=_no_wait)
    if args.values:
        session.set_custom(args.values)
    return session


def main() -> None:
    """Parse arguments, run the selected algorithms and print the report."""
    parser = argparse.ArgumentParser(description="Compare sorting algorithms")
    parser.add_argument("--algorithm", choices=list(ALGORITHMS), default=None)
    parser.add_argument("--size", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--values", help="Comma-separated custom values")
    parser.add_argument("--preset", help="Preset file under presets/")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        session = build_session(args)
    except (SortVisualizerError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return

    values = session.array.values()
    algorithms = [args.algorithm] if args.algorithm else None
    print(f"--- Sorting {len(values)} values ---")
    report = compare_algorithms(values, algorithms)
    print(report.to_string(index=False))

    if args.algorithm:
        outcome = asyncio.run(session.start())
        summary = session.last_run
        print(f"\nLive run: {outcome.value}, {summary.metrics.comparisons} comparisons")


if __name__ == "__main__":
    main()
