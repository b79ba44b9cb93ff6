"""
HiGHS implementation of the row model.

This module provides a ready-to-use LP backend for row generation using
HiGHS via the highspy Python bindings. Rows are appended incrementally, so
HiGHS re-optimizes from the previous basis after each added cut.

Usage:
    >>> from openrg.lp import HiGHSRowModel
    >>> model = HiGHSRowModel(sense='min')
    >>> x = model.add_column(cost=1.0, upper=1.0)
    >>> y = model.add_column(cost=2.0, upper=1.0)
    >>> model.add_row({x: 1.0, y: 1.0}, '>=', 1.0)
    >>> solution = model.solve()
"""

import time
from typing import Optional

try:
    import highspy
    HIGHS_AVAILABLE = True
except ImportError:
    HIGHS_AVAILABLE = False

from openrg.lp.base import ColumnSpec, Row, RowModel
from openrg.lp.solution import LPSolution, LPStatus


def _map_highs_status(status) -> LPStatus:
    """Map HiGHS model status to our LPStatus."""
    if not HIGHS_AVAILABLE:
        return LPStatus.ERROR

    status_map = {
        highspy.HighsModelStatus.kNotset: LPStatus.NOT_SOLVED,
        highspy.HighsModelStatus.kLoadError: LPStatus.ERROR,
        highspy.HighsModelStatus.kModelError: LPStatus.ERROR,
        highspy.HighsModelStatus.kPresolveError: LPStatus.ERROR,
        highspy.HighsModelStatus.kSolveError: LPStatus.ERROR,
        highspy.HighsModelStatus.kPostsolveError: LPStatus.ERROR,
        highspy.HighsModelStatus.kModelEmpty: LPStatus.OPTIMAL,
        highspy.HighsModelStatus.kOptimal: LPStatus.OPTIMAL,
        highspy.HighsModelStatus.kInfeasible: LPStatus.INFEASIBLE,
        highspy.HighsModelStatus.kUnbounded: LPStatus.UNBOUNDED,
        highspy.HighsModelStatus.kUnboundedOrInfeasible: LPStatus.INF_OR_UNBOUNDED,
        highspy.HighsModelStatus.kTimeLimit: LPStatus.TIME_LIMIT,
        highspy.HighsModelStatus.kIterationLimit: LPStatus.ITERATION_LIMIT,
    }

    return status_map.get(status, LPStatus.ERROR)


class HiGHSRowModel(RowModel):
    """
    Row model backed by HiGHS.

    Presolve is switched off so that kUnboundedOrInfeasible is resolved
    into a definite status whenever the simplex can tell them apart.

    Attributes:
        time_limit: Maximum solve time in seconds (None = no limit)
        verbosity: HiGHS output level (0 = silent, 1 = normal)
    """

    def __init__(
        self,
        sense: str = 'min',
        time_limit: Optional[float] = None,
        verbosity: int = 0,
    ):
        """
        Initialize the HiGHS row model.

        Args:
            sense: Objective sense, 'min' or 'max'
            time_limit: Maximum solve time in seconds (None = no limit)
            verbosity: HiGHS output level (0 = silent)

        Raises:
            ImportError: If highspy is not installed
        """
        if not HIGHS_AVAILABLE:
            raise ImportError(
                "HiGHS is not available. Install it with: pip install highspy"
            )

        self._time_limit = time_limit
        self._verbosity = verbosity
        self._highs: Optional[highspy.Highs] = None

        super().__init__(sense)

    def _build_model(self) -> None:
        """Create an empty HiGHS model."""
        self._highs = highspy.Highs()

        self._highs.setOptionValue('output_flag', self._verbosity > 0)
        self._highs.setOptionValue('log_to_console', self._verbosity > 0)
        self._highs.setOptionValue('presolve', 'off')

        if self._time_limit is not None:
            self._highs.setOptionValue('time_limit', self._time_limit)

        if self._sense == 'min':
            self._highs.changeObjectiveSense(highspy.ObjSense.kMinimize)
        else:
            self._highs.changeObjectiveSense(highspy.ObjSense.kMaximize)

    def _add_column_impl(self, column: ColumnSpec) -> int:
        """Add an empty column (no row entries yet)."""
        upper = highspy.kHighsInf if column.upper is None else column.upper
        self._highs.addCol(column.cost, column.lower, upper, 0, [], [])
        return self._highs.getNumCol() - 1

    def _add_row_impl(self, row: Row) -> int:
        """Add a row to the HiGHS model."""
        indices = list(row.coefficients.keys())
        values = list(row.coefficients.values())

        if row.sense == '<=':
            lower = -highspy.kHighsInf
            upper = row.rhs
        elif row.sense == '>=':
            lower = row.rhs
            upper = highspy.kHighsInf
        else:  # '='
            lower = row.rhs
            upper = row.rhs

        self._highs.addRow(lower, upper, len(indices), indices, values)
        return self._highs.getNumRow() - 1

    def _solve_impl(self) -> LPSolution:
        """Run HiGHS and collect the result."""
        start_time = time.time()
        self._highs.run()
        solve_time = time.time() - start_time

        status = _map_highs_status(self._highs.getModelStatus())
        info = self._highs.getInfo()

        solution = LPSolution(
            status=status,
            solve_time=solve_time,
            iterations=info.simplex_iteration_count,
            num_rows=self.num_rows,
        )

        if status in (LPStatus.OPTIMAL, LPStatus.TIME_LIMIT, LPStatus.ITERATION_LIMIT):
            solution.objective_value = info.objective_function_value
            sol = self._highs.getSolution()
            solution.column_values = [float(v) for v in sol.col_value][:self.num_columns]
            if sol.dual_valid:
                solution.row_duals = [float(v) for v in sol.row_dual][:self.num_rows]

        return solution

    @property
    def time_limit(self) -> Optional[float]:
        """Solver time limit in seconds (None = no limit)."""
        return self._time_limit

    def set_time_limit(self, seconds: float) -> None:
        """
        Set the solver time limit.

        Args:
            seconds: Maximum solve time in seconds
        """
        self._time_limit = seconds
        self._highs.setOptionValue('time_limit', seconds)

    def get_model_stats(self) -> dict:
        """
        Get statistics about the model.

        Returns:
            Dictionary with model statistics
        """
        return {
            'num_columns': self._highs.getNumCol(),
            'num_rows': self._highs.getNumRow(),
            'num_nonzeros': self._highs.getNumNz(),
        }
