from src.problem.config import EncodingConfig, OptimizerConfig, SearchConfig, load_config
from src.problem.requirements import (
    ClientRequirement,
    PaintProblem,
    RequirementPair,
    RequirementSet,
)
from src.problem.parser import InputFormatError, parse_file_input, read_file_contents
from src.problem.formatter import format_solution

__all__ = [
    "EncodingConfig",
    "OptimizerConfig",
    "SearchConfig",
    "load_config",
    "ClientRequirement",
    "PaintProblem",
    "RequirementPair",
    "RequirementSet",
    "InputFormatError",
    "parse_file_input",
    "read_file_contents",
    "format_solution",
]
