"""
src/optimizer/benchmark.py
──────────────────────────────────────────────────────────────────────────────
Benchmark: exhaustive search cost as the number of colors grows.

Draws random paint problems and solves each with ExhaustiveSearchSolver.
The search always materializes all 2^n candidates, so solve time roughly
doubles per extra color whether or not a solution exists.

Metrics per color count:
  • Solve time            (mean / P95 / max, ms)
  • Feasibility rate      (problems with a solution / problems drawn)
  • Mean cost             (expensive colors in the solutions found)
  • Mean candidates       (how far down the ranking the match sat)

Usage:
    python -m src.optimizer.benchmark                     # defaults
    python -m src.optimizer.benchmark --problems 100
    python -m src.optimizer.benchmark --colors 4 8 12 16 --clients 20
"""

from __future__ import annotations

import argparse

import numpy as np

from src.optimizer.search import ExhaustiveSearchSolver, SearchStatus
from src.problem.config import SearchConfig
from src.problem.requirements import (
    CHEAP_DIGIT,
    EXPENSIVE_DIGIT,
    ClientRequirement,
    PaintProblem,
    RequirementPair,
    RequirementSet,
)


# ── Problem generation ────────────────────────────────────────────────────────


def generate_problem(
    colors: int,
    n_clients: int,
    rng: np.random.Generator,
    max_pairs: int = 3,
    expensive_fraction: float = 0.3,
) -> PaintProblem:
    """Generate a random paint problem.

    Every client gets between 1 and max_pairs distinct positions (capped at
    colors); each pair asks for the expensive finish with probability
    expensive_fraction.
    """
    clients = []
    for client_id in range(n_clients):
        n_pairs = int(rng.integers(1, min(max_pairs, colors) + 1))
        positions = rng.choice(colors, size=n_pairs, replace=False)
        pairs = tuple(
            RequirementPair(
                int(p), EXPENSIVE_DIGIT if rng.random() < expensive_fraction else CHEAP_DIGIT
            )
            for p in positions
        )
        clients.append(ClientRequirement(client_id=client_id, pairs=pairs))
    return PaintProblem(colors=colors, requirements=RequirementSet(clients=tuple(clients)))


# ── Main benchmark loop ───────────────────────────────────────────────────────


def run_benchmark(
    n_problems: int = 20,
    color_counts: list[int] | None = None,
    n_clients: int = 10,
    seed: int = 42,
) -> dict[int, dict[str, list]]:
    """Run random problems per color count, print a table and return raw samples."""

    color_counts = color_counts or [4, 8, 12, 14]

    print("=" * 80)
    print("  Paint Optimizer Exhaustive Search Benchmark")
    print("=" * 80)
    print(f"  Problems per size: {n_problems}  |  Clients: {n_clients}  |  Seed: {seed}")
    print(f"  Color counts:      {', '.join(str(c) for c in color_counts)}")
    print()

    solver = ExhaustiveSearchSolver(SearchConfig(max_colors=max(color_counts)))
    rng = np.random.default_rng(seed)

    results: dict[int, dict[str, list]] = {
        c: {"time_ms": [], "feasible": [], "cost": [], "checked": []} for c in color_counts
    }

    for colors in color_counts:
        for _ in range(n_problems):
            problem = generate_problem(colors, n_clients, rng)
            r = solver.solve_with_diagnostics(problem.colors, problem.requirements)
            results[colors]["time_ms"].append(r.solve_time_ms)
            results[colors]["feasible"].append(r.status == SearchStatus.OPTIMAL)
            results[colors]["checked"].append(r.candidates_checked)
            if r.cost is not None:
                results[colors]["cost"].append(r.cost)

    # ── Print results ─────────────────────────────────────────────────────────
    col_w = 12

    print(
        f"  {'Colors':<8}{'Space':>{col_w}}{'Avg ms':>{col_w}}{'P95 ms':>{col_w}}"
        f"{'Max ms':>{col_w}}{'Feasible%':>{col_w}}{'Avg cost':>{col_w}}"
    )
    print("  " + "─" * (8 + col_w * 6))
    for colors in color_counts:
        d = results[colors]
        avg_cost = np.mean(d["cost"]) if d["cost"] else float("nan")
        print(
            f"  {colors:<8}{2**colors:>{col_w}}"
            f"{np.mean(d['time_ms']):>{col_w}.2f}"
            f"{np.percentile(d['time_ms'], 95):>{col_w}.2f}"
            f"{np.max(d['time_ms']):>{col_w}.2f}"
            f"{np.mean(d['feasible']) * 100:>{col_w}.1f}"
            f"{avg_cost:>{col_w}.2f}"
        )

    print(f"\n  Total solves: {solver.total_solves}  |  Infeasible: {solver.total_infeasible}")
    print(f"  Avg solve time: {solver.avg_solve_time_ms:.2f} ms")
    print("\n" + "=" * 80)
    return results


# ── CLI entry point ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the exhaustive paint search")
    parser.add_argument("--problems", type=int, default=20)
    parser.add_argument("--colors", type=int, nargs="+", default=None)
    parser.add_argument("--clients", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()
    run_benchmark(args.problems, args.colors, args.clients, args.seed)
