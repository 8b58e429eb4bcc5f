"""
Command line entry point for the paint optimizer.

Usage:
    paint-optimizer problem.txt
    paint-optimizer problem.txt --config config/default_optimizer.yaml
    paint-optimizer problem.txt --verbose       # search diagnostics on stderr

Prints the cheapest assignment (e.g. "G G G G M ") or "No solution exists"
to stdout. Malformed input, a bad config or a search space above
search.max_colors is reported on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.optimizer.pipeline import optimize_with_diagnostics
from src.problem.config import OptimizerConfig, load_config
from src.problem.parser import InputFormatError

DEFAULT_CONFIG_PATH = "config/default_optimizer.yaml"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the optimizer CLI"""

    parser = argparse.ArgumentParser(
        description="Find the cheapest paint batch that satisfies every client"
    )
    parser.add_argument("input", type=str, help="Path to the problem file")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to optimizer config YAML (defaults are used if it does not exist)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print search diagnostics to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main"""

    args = build_parser().parse_args(argv)

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        try:
            config = load_config(config_path)
        except (ValueError, TypeError) as e:
            print(f"Config error: {config_path}: {e}", file=sys.stderr)
            return 1
        config_source = f"Loaded config from {config_path}"
    else:
        config = OptimizerConfig()
        config_source = f"Config {config_path} not found, using defaults"

    # Run
    try:
        text, result = optimize_with_diagnostics(args.input, config)
    except (InputFormatError, OSError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Search limit: {e}", file=sys.stderr)
        return 1

    print(text)

    if args.verbose:
        print(config_source, file=sys.stderr)
        print(f"{'Status':<20} {result.status.name}", file=sys.stderr)
        print(f"{'Search space':<20} {result.search_space}", file=sys.stderr)
        print(f"{'Candidates checked':<20} {result.candidates_checked}", file=sys.stderr)
        if result.cost is not None:
            print(f"{'Cost':<20} {result.cost}", file=sys.stderr)
        print(f"{'Solve time (ms)':<20} {result.solve_time_ms:.2f}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
