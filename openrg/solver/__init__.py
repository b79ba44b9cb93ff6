"""
Solver module - the row generation loop.

This module provides:
- row_generation: The bare solve / separate loop
- RowGeneration: Controller with limits, callbacks and history
- RGConfig: Controller configuration
- RGSolution: Solution data structure
- RGStatus: Solution status enum
- RGIteration: Per-iteration information

Usage:
------
Bare loop:

    >>> from openrg.solver import row_generation
    >>> from openrg.separation import max_violated_separation_oracle
    >>> oracle = max_violated_separation_oracle(get_cuts, how_violated, add_cut)
    >>> status = row_generation(oracle, model.solve_status)

Controller with monitoring:

    >>> from openrg.solver import RowGeneration, RGConfig
    >>> rg = RowGeneration(model.solve, oracle, RGConfig(max_iterations=500))
    >>> rg.add_callback(lambda rg, it: it.iteration < 50)
    >>> solution = rg.solve()
    >>> print(solution.summary())
"""

from openrg.solver.solution import RGIteration, RGSolution, RGStatus
from openrg.solver.controller import (
    RGCallback,
    RGConfig,
    RowGeneration,
    row_generation,
)

__all__ = [
    # Main entry points
    'row_generation',
    'RowGeneration',

    # Configuration
    'RGConfig',
    'RGCallback',

    # Solution
    'RGSolution',
    'RGStatus',
    'RGIteration',
]
