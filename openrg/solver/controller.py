"""
Row generation controller.

Row generation (cutting-plane / constraint generation) finds an extreme
point solution to an LP whose constraint family is too large to write
down: solve a relaxation, ask a separation oracle for a violated row, add
it and re-solve, until the oracle finds nothing.

Algorithm Overview:
------------------
    repeat:
        status = solve_lp()
    while status is OPTIMAL and try_add_violated()
    return status

The loop is correct as long as the oracle is exact: it may only report
"no violation" when no candidate is violated. Non-optimal statuses
(infeasible, unbounded, solver errors) end the loop immediately and are
returned as results. Exceptions raised by either callable propagate to
the caller untouched.

This module provides:
- row_generation: The bare loop
- RowGeneration: Controller adding limits, callbacks and history
- RGConfig: Controller configuration
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from openrg.lp.solution import LPStatus
from openrg.solver.solution import RGIteration, RGSolution, RGStatus

logger = logging.getLogger(__name__)

SolveLp = Callable[[], Any]
TryAddViolated = Callable[[], bool]


def _status_of(result: Any) -> Any:
    """Read a status from solve_lp's result (a status or an LPSolution)."""
    return getattr(result, 'status', result)


def row_generation(
    try_add_violated: TryAddViolated,
    solve_lp: SolveLp,
    optimal: Any = LPStatus.OPTIMAL,
) -> Any:
    """
    Run row generation until the relaxed optimum is feasible or the LP fails.

    Args:
        try_add_violated: Adds one violated row and returns True, or
            returns False when none exists (typically a separation oracle)
        solve_lp: Re-optimizes the LP and returns a status or an LPSolution
        optimal: The status value meaning "optimal" (default LPStatus.OPTIMAL)

    Returns:
        The status of the last LP solve

    Example:
        >>> status = row_generation(oracle, model.solve_status)
        >>> status is LPStatus.OPTIMAL
        True
    """
    status = _status_of(solve_lp())
    while status == optimal and try_add_violated():
        status = _status_of(solve_lp())
    return status


@dataclass
class RGConfig:
    """
    Configuration for the row generation controller.

    Attributes:
        max_iterations: Maximum number of LP solves (0 = unlimited)
        max_time: Maximum total time in seconds (0 = unlimited)
        verbose: Log progress at INFO instead of DEBUG
    """
    max_iterations: int = 0
    max_time: float = 0.0
    verbose: bool = False


# Type alias for callback functions
RGCallback = Callable[['RowGeneration', RGIteration], bool]


class RowGeneration:
    """
    Row generation algorithm controller.

    Runs the same loop as row_generation() while recording each iteration,
    invoking callbacks and enforcing optional limits. Limits are checked
    only after a row has been added, so the LP is always solved at least
    once and each addition is followed by a solve unless the run stops.

    Example:
        >>> from openrg.solver import RowGeneration, RGConfig
        >>> rg = RowGeneration(model.solve, oracle, RGConfig(max_iterations=100))
        >>> solution = rg.solve()
        >>> print(solution.status.name, solution.rows_added)

    Callbacks:
        Register callbacks to monitor progress:

        >>> def my_callback(rg, iteration):
        ...     print(f"Iteration {iteration.iteration}: obj={iteration.objective}")
        ...     return True  # Continue solving
        >>> rg.add_callback(my_callback)
    """

    def __init__(
        self,
        solve_lp: SolveLp,
        try_add_violated: TryAddViolated,
        config: Optional[RGConfig] = None,
        optimal: Any = LPStatus.OPTIMAL,
    ):
        """
        Initialize the controller.

        Args:
            solve_lp: Re-optimizes the LP, returns a status or an LPSolution
            try_add_violated: Adds one violated row, returns whether it did
            config: Configuration options (uses defaults if not provided)
            optimal: The status value meaning "optimal"
        """
        self._solve_lp = solve_lp
        self._try_add_violated = try_add_violated
        self._config = config or RGConfig()
        self._optimal = optimal

        self._callbacks: list[RGCallback] = []

        self._is_solved = False
        self._solution: Optional[RGSolution] = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> RGConfig:
        """Configuration options."""
        return self._config

    @property
    def is_solved(self) -> bool:
        """Whether solve() has been called."""
        return self._is_solved

    @property
    def solution(self) -> Optional[RGSolution]:
        """The solution (None if not yet solved)."""
        return self._solution

    # =========================================================================
    # Configuration
    # =========================================================================

    def add_callback(self, callback: RGCallback) -> None:
        """
        Add a callback function.

        Callbacks are called after each iteration with the RowGeneration
        instance and iteration info. Return False to stop the algorithm.

        Args:
            callback: Function taking (RowGeneration, RGIteration) -> bool
        """
        self._callbacks.append(callback)

    # =========================================================================
    # Main Algorithm
    # =========================================================================

    def solve(self) -> RGSolution:
        """
        Run the row generation algorithm.

        Returns:
            RGSolution with results and statistics
        """
        start_time = time.time()
        level = logging.INFO if self._config.verbose else logging.DEBUG

        history: list[RGIteration] = []
        total_solve_time = 0.0
        total_separation_time = 0.0
        rows_added = 0
        iteration = 0
        lp_status: Any = None
        objective: Optional[float] = None

        while True:
            iteration += 1

            solve_start = time.time()
            result = self._solve_lp()
            solve_time = time.time() - solve_start
            total_solve_time += solve_time

            lp_status = _status_of(result)
            objective = getattr(result, 'objective_value', None)

            if lp_status != self._optimal:
                history.append(RGIteration(
                    iteration=iteration,
                    lp_status=lp_status,
                    objective=objective,
                    row_added=False,
                    solve_time=solve_time,
                    separation_time=0.0,
                ))
                status = self._terminal_status(lp_status)
                logger.log(level, "Iteration %d: LP status %s, stopping",
                           iteration, getattr(lp_status, 'name', lp_status))
                self._invoke_callbacks(history[-1])
                break

            separation_start = time.time()
            added = bool(self._try_add_violated())
            separation_time = time.time() - separation_start
            total_separation_time += separation_time

            iter_info = RGIteration(
                iteration=iteration,
                lp_status=lp_status,
                objective=objective,
                row_added=added,
                solve_time=solve_time,
                separation_time=separation_time,
            )
            history.append(iter_info)

            if not added:
                status = RGStatus.OPTIMAL
                logger.log(level, "Iteration %d: no violated row found. LP optimal.", iteration)
                self._invoke_callbacks(iter_info)
                break

            rows_added += 1
            logger.log(level, "Iteration %d: obj=%s, rows added=%d",
                       iteration, objective, rows_added)

            if not self._invoke_callbacks(iter_info):
                status = RGStatus.STOPPED
                break

            if self._config.max_iterations > 0 and iteration >= self._config.max_iterations:
                status = RGStatus.ITERATION_LIMIT
                logger.log(level, "Stopping: iteration limit %d reached",
                           self._config.max_iterations)
                break

            elapsed = time.time() - start_time
            if self._config.max_time > 0 and elapsed >= self._config.max_time:
                status = RGStatus.TIME_LIMIT
                logger.log(level, "Stopping: time limit %.1fs reached", self._config.max_time)
                break

        solution = RGSolution(
            status=status,
            lp_status=lp_status,
            objective_value=objective,
            iterations=iteration,
            rows_added=rows_added,
            total_time=time.time() - start_time,
            solve_time=total_solve_time,
            separation_time=total_separation_time,
            iteration_history=history,
        )

        if self._config.verbose:
            logger.info("Row generation finished: %r", solution)

        self._solution = solution
        self._is_solved = True
        return solution

    def _terminal_status(self, lp_status: Any) -> RGStatus:
        """Map a non-optimal LP status onto the controller's status."""
        name = getattr(lp_status, 'name', None)
        if name == 'INFEASIBLE':
            return RGStatus.INFEASIBLE
        if name == 'UNBOUNDED':
            return RGStatus.UNBOUNDED
        return RGStatus.LP_ERROR

    def _invoke_callbacks(self, iteration: RGIteration) -> bool:
        """
        Invoke all callbacks.

        Args:
            iteration: Current iteration info

        Returns:
            True to continue, False to stop
        """
        for callback in self._callbacks:
            if not callback(self, iteration):
                return False
        return True

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def get_iteration_history(self) -> list[RGIteration]:
        """
        Get the history of all iterations.

        Returns:
            List of RGIteration objects
        """
        if self._solution is None:
            return []
        return self._solution.iteration_history

    def __repr__(self) -> str:
        status = "solved" if self._is_solved else "not solved"
        return f"RowGeneration({status})"
