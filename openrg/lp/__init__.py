"""
LP module - the LP-side collaborator of row generation.

Row generation treats the LP as an opaque pair of callables: one that
(re)solves and reports a status, and one that appends a violated row.
This module provides:
- LPStatus: Enum for solve status
- LPSolution: Solution data structure
- RowModel: Abstract base class for LPs grown one row at a time
- Row, ColumnSpec: Row and column records
- HiGHSRowModel: Default implementation using the HiGHS solver

Usage:
------
    >>> from openrg.lp import HiGHSRowModel
    >>> model = HiGHSRowModel()
    >>> x = model.add_column(cost=-1.0, upper=10.0)
    >>> model.add_row({x: 1.0}, '<=', 4.0)
    >>> model.solve().objective_value
    -4.0

Wiring into the loop:

    >>> from openrg.solver import row_generation
    >>> status = row_generation(oracle, model.solve_status)
"""

from openrg.lp.solution import LPSolution, LPStatus
from openrg.lp.base import VALID_SENSES, ColumnSpec, Row, RowModel

# Try to import HiGHS implementation
try:
    from openrg.lp.highs import HiGHSRowModel, HIGHS_AVAILABLE
except ImportError:
    HIGHS_AVAILABLE = False
    HiGHSRowModel = None  # type: ignore


__all__ = [
    # Solution
    'LPSolution',
    'LPStatus',

    # Base class
    'RowModel',
    'Row',
    'ColumnSpec',
    'VALID_SENSES',

    # HiGHS implementation
    'HiGHSRowModel',
    'HIGHS_AVAILABLE',
]
