"""
Quick-run script for the paint optimizer.

Usage:
    python run_optimizer.py problem.txt
    python run_optimizer.py problem.txt --config config/default_optimizer.yaml
    python run_optimizer.py problem.txt --verbose

Prints the cheapest assignment to stdout. Same as the paint-optimizer
console script.
"""

import sys

from src.optimizer.cli import main


if __name__ == "__main__":
    sys.exit(main())
