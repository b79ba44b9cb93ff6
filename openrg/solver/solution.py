"""
Row generation solution module.

This module defines the data structures for representing the results
of the row generation controller.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class RGStatus(Enum):
    """
    Status of the row generation algorithm.
    """
    OPTIMAL = auto()           # LP optimal and no violated row remains
    INFEASIBLE = auto()        # Relaxed LP is infeasible
    UNBOUNDED = auto()         # Relaxed LP is unbounded
    LP_ERROR = auto()          # Any other non-optimal LP status
    ITERATION_LIMIT = auto()   # Iteration limit reached
    TIME_LIMIT = auto()        # Time limit reached
    STOPPED = auto()           # A callback asked to stop
    NOT_SOLVED = auto()        # Not yet solved


@dataclass
class RGIteration:
    """
    Information about a single row generation iteration.

    Attributes:
        iteration: Iteration number (1-based)
        lp_status: Status returned by the LP solve
        objective: LP objective, when the solve reported one
        row_added: Whether the oracle added a row after this solve
        solve_time: Time spent in solve_lp
        separation_time: Time spent in the oracle
    """
    iteration: int
    lp_status: Any
    objective: Optional[float]
    row_added: bool
    solve_time: float
    separation_time: float


@dataclass
class RGSolution:
    """
    Result of the row generation algorithm.

    Attributes:
        status: Termination status
        lp_status: Status of the last LP solve
        objective_value: Objective of the last LP solve (if reported)
        iterations: Number of LP solves
        rows_added: Number of rows added by the oracle
        total_time: Total wall time
        solve_time: Time spent in LP solves
        separation_time: Time spent in the oracle
        iteration_history: Per-iteration records
        metadata: Free-form extra information

    Example:
        >>> solution = rg.solve()
        >>> if solution.is_optimal:
        ...     print(f"Optimal value: {solution.objective_value}")
    """
    status: RGStatus = RGStatus.NOT_SOLVED
    lp_status: Any = None
    objective_value: Optional[float] = None
    iterations: int = 0
    rows_added: int = 0
    total_time: float = 0.0
    solve_time: float = 0.0
    separation_time: float = 0.0
    iteration_history: List[RGIteration] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_optimal(self) -> bool:
        """Check if the LP optimum satisfies the full constraint family."""
        return self.status == RGStatus.OPTIMAL

    @property
    def is_limit(self) -> bool:
        """Check if the run was cut short by a limit or a callback."""
        return self.status in (
            RGStatus.ITERATION_LIMIT,
            RGStatus.TIME_LIMIT,
            RGStatus.STOPPED,
        )

    def get_convergence_history(self) -> List[Optional[float]]:
        """
        Get objective values over iterations.

        Returns:
            List of objective values, one per iteration
        """
        return [it.objective for it in self.iteration_history]

    def summary(self) -> str:
        """
        Return a human-readable summary.

        Returns:
            Summary string
        """
        lp_name = getattr(self.lp_status, 'name', self.lp_status)
        lines = [
            "Row Generation Solution:",
            f"  Status: {self.status.name}",
            f"  Last LP status: {lp_name}",
        ]

        if self.objective_value is not None:
            lines.append(f"  Objective: {self.objective_value:.6f}")

        lines.extend([
            "",
            f"  Iterations: {self.iterations}",
            f"  Rows added: {self.rows_added}",
            "",
            f"  Total time: {self.total_time:.3f}s",
            f"  LP time: {self.solve_time:.3f}s ({100*self.solve_time/max(self.total_time, 1e-6):.1f}%)",
            f"  Separation time: {self.separation_time:.3f}s ({100*self.separation_time/max(self.total_time, 1e-6):.1f}%)",
        ])

        return "\n".join(lines)

    def __repr__(self) -> str:
        obj_str = f", obj={self.objective_value:.4f}" if self.objective_value is not None else ""
        return f"RGSolution({self.status.name}{obj_str}, iter={self.iterations})"
