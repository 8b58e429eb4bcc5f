"""Integration tests: problem file → search → printed answer.

These tests run the whole pipeline the way the CLI does, plus a short
benchmark run to check the random problem generator.

Run with: pytest tests/test_pipeline.py -v
"""

from pathlib import Path

import numpy as np
import pytest

from src.optimizer.benchmark import generate_problem, run_benchmark
from src.optimizer.cli import main
from src.optimizer.pipeline import load_problem, optimize, optimize_with_diagnostics
from src.optimizer.search import SearchStatus
from src.problem.config import EncodingConfig, OptimizerConfig, SearchConfig
from src.problem.parser import InputFormatError

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def input_file() -> Path:
    return DATA_DIR / "test_input.txt"


@pytest.fixture
def fail_file() -> Path:
    return DATA_DIR / "test_input_fail.txt"


class TestOptimize:
    """End-to-end tests for optimize()."""

    def test_optimizer_finds_cheapest_solution(self, input_file):
        assert optimize(input_file) == "G G G G M "

    def test_optimizer_notifies_of_no_solution(self, fail_file):
        assert optimize(fail_file) == "No solution exists"

    def test_accepts_string_path(self, input_file):
        assert optimize(str(input_file)) == "G G G G M "

    def test_diagnostics(self, input_file):
        text, result = optimize_with_diagnostics(input_file)
        assert text == "G G G G M "
        assert result.status == SearchStatus.OPTIMAL
        assert result.cost == 1
        assert result.search_space == 32

    def test_custom_encoding(self, fail_file):
        config = OptimizerConfig(encoding=EncodingConfig(no_solution_message="impossible"))
        assert optimize(fail_file, config) == "impossible"

    def test_out_of_range_rejected_by_default(self):
        with pytest.raises(InputFormatError, match="out of range"):
            optimize(DATA_DIR / "test_input_out_of_range.txt")

    def test_out_of_range_ignored_by_policy(self):
        config = OptimizerConfig(search=SearchConfig(position_policy="ignore"))
        problem = load_problem(DATA_DIR / "test_input_out_of_range.txt", config)
        assert 6 in problem.requirements.positions()
        assert optimize(DATA_DIR / "test_input_out_of_range.txt", config) == "G G G G M "

    def test_bad_header(self):
        with pytest.raises(InputFormatError, match="line 1"):
            optimize(DATA_DIR / "test_input_bad_header.txt")


class TestCLI:
    """Tests for the command line entry point."""

    def test_prints_solution(self, input_file, capsys):
        assert main([str(input_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "G G G G M \n"
        assert captured.err == ""

    def test_prints_no_solution(self, fail_file, capsys):
        assert main([str(fail_file)]) == 0
        assert capsys.readouterr().out == "No solution exists\n"

    def test_verbose_goes_to_stderr(self, input_file, tmp_path, capsys):
        assert main([str(input_file), "--config", str(tmp_path / "none.yaml"), "--verbose"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "G G G G M \n"
        assert "not found, using defaults" in captured.err
        assert "OPTIMAL" in captured.err
        assert "Candidates checked" in captured.err

    def test_uses_config_file(self, fail_file, tmp_path, capsys):
        config_path = tmp_path / "optimizer.yaml"
        config_path.write_text("encoding:\n  no_solution_message: nope\n", encoding="utf-8")
        assert main([str(fail_file), "--config", str(config_path)]) == 0
        assert capsys.readouterr().out == "nope\n"

    def test_input_error(self, capsys):
        assert main([str(DATA_DIR / "test_input_bad_header.txt")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Input error: line 1:")

    def test_search_limit_is_reported_not_raised(self, capsys):
        """A ColorCount above search.max_colors exits 1 with a message."""
        assert main([str(DATA_DIR / "test_input_too_many_colors.txt")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Search limit: 25 colors")
        assert "search.max_colors" in captured.err

    def test_search_limit_can_be_raised_by_config(self, tmp_path, capsys):
        config_path = tmp_path / "optimizer.yaml"
        config_path.write_text("search:\n  max_colors: 2\n", encoding="utf-8")
        assert main([str(DATA_DIR / "test_input.txt"), "--config", str(config_path)]) == 1
        assert capsys.readouterr().err.startswith("Search limit: 5 colors")

    @pytest.mark.parametrize(
        "config_text, message",
        [
            ("search:\n  position_policy: clip\n", "Unknown position policy 'clip'"),
            ("search:\n  pruning: true\n", "pruning"),
        ],
    )
    def test_bad_config_is_reported_not_raised(
        self, input_file, tmp_path, capsys, config_text, message
    ):
        config_path = tmp_path / "optimizer.yaml"
        config_path.write_text(config_text, encoding="utf-8")
        assert main([str(input_file), "--config", str(config_path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Config error:")
        assert message in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Input error" in capsys.readouterr().err

    def test_requires_input_argument(self):
        with pytest.raises(SystemExit):
            main([])


class TestBenchmark:
    """Smoke tests for the random problem benchmark."""

    def test_generate_problem(self):
        rng = np.random.default_rng(0)
        problem = generate_problem(6, 8, rng, max_pairs=3)

        assert problem.colors == 6
        assert len(problem.requirements) == 8
        for client in problem.requirements:
            assert 1 <= len(client) <= 3
            positions = [pair.position for pair in client]
            assert len(set(positions)) == len(positions)
            assert all(0 <= p < 6 for p in positions)
            assert all(pair.value in ("0", "1") for pair in client)

    def test_generate_problem_is_seeded(self):
        a = generate_problem(5, 4, np.random.default_rng(7))
        b = generate_problem(5, 4, np.random.default_rng(7))
        assert a == b

    def test_run_benchmark(self, capsys):
        results = run_benchmark(n_problems=3, color_counts=[2, 4], n_clients=3, seed=1)
        assert set(results) == {2, 4}
        assert len(results[4]["time_ms"]) == 3
        assert "Exhaustive Search Benchmark" in capsys.readouterr().out
