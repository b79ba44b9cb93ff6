"""
OpenRG: Open-Source Row Generation Framework

A small, extensible framework for solving linear programs with large or
implicitly defined constraint families by row generation (cutting planes).
"""

__version__ = "0.1.0"

# Configuration
from openrg.config import config, setup_logging

# LP collaborator
from openrg.lp import (
    HIGHS_AVAILABLE,
    HiGHSRowModel,
    LPSolution,
    LPStatus,
    Row,
    RowModel,
)

# Separation oracles
from openrg.separation import (
    FirstViolatedOracle,
    MaxViolatedOracle,
    RandomViolatedOracle,
    SeparationOracle,
    create_oracle,
    first_violated_separation_oracle,
    max_violated_separation_oracle,
    random_violated_separation_oracle,
)

# Row generation solver
from openrg.solver import (
    RGConfig,
    RGIteration,
    RGSolution,
    RGStatus,
    RowGeneration,
    row_generation,
)

# Applications
from openrg.applications import (
    SpanningTreeInstance,
    SpanningTreeSolution,
    solve_spanning_tree,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "config",
    "setup_logging",
    # LP
    "LPStatus",
    "LPSolution",
    "Row",
    "RowModel",
    "HiGHSRowModel",
    "HIGHS_AVAILABLE",
    # Separation
    "SeparationOracle",
    "MaxViolatedOracle",
    "FirstViolatedOracle",
    "RandomViolatedOracle",
    "max_violated_separation_oracle",
    "first_violated_separation_oracle",
    "random_violated_separation_oracle",
    "create_oracle",
    # Solver
    "row_generation",
    "RowGeneration",
    "RGConfig",
    "RGSolution",
    "RGStatus",
    "RGIteration",
    # Applications
    "SpanningTreeInstance",
    "SpanningTreeSolution",
    "solve_spanning_tree",
]
