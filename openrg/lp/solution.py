"""
LP solution module.

This module defines the data structures returned by an LP solve inside
the row generation loop.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional


class LPStatus(Enum):
    """
    Status of an LP solve.

    The row generation loop only distinguishes OPTIMAL (keep separating)
    from everything else (stop and report).
    """
    OPTIMAL = auto()           # Optimal solution found
    INFEASIBLE = auto()        # Problem is infeasible
    UNBOUNDED = auto()         # Problem is unbounded
    INF_OR_UNBOUNDED = auto()  # Infeasible or unbounded (solver couldn't determine)
    TIME_LIMIT = auto()        # Time limit reached
    ITERATION_LIMIT = auto()   # Simplex iteration limit reached
    NOT_SOLVED = auto()        # Solve not called yet
    ERROR = auto()             # Solver error occurred


@dataclass
class LPSolution:
    """
    Result of solving the current (relaxed) LP.

    Attributes:
        status: Solution status (OPTIMAL, INFEASIBLE, etc.)
        objective_value: Objective function value (None if not solved/infeasible)
        column_values: Primal values indexed by column position
        row_duals: Dual values indexed by row position
        solve_time: Time spent solving in seconds
        iterations: Number of simplex iterations
        num_rows: Number of rows in the model when solved

    Example:
        >>> solution = model.solve()
        >>> if solution.is_optimal:
        ...     print(f"Objective: {solution.objective_value}")
    """
    status: LPStatus = LPStatus.NOT_SOLVED
    objective_value: Optional[float] = None
    column_values: List[float] = field(default_factory=list)
    row_duals: List[float] = field(default_factory=list)
    solve_time: float = 0.0
    iterations: int = 0
    num_rows: int = 0

    @property
    def is_optimal(self) -> bool:
        """Check if solution is optimal."""
        return self.status == LPStatus.OPTIMAL

    @property
    def is_infeasible(self) -> bool:
        """Check if problem is infeasible."""
        return self.status == LPStatus.INFEASIBLE

    @property
    def is_unbounded(self) -> bool:
        """Check if problem is unbounded."""
        return self.status == LPStatus.UNBOUNDED

    @property
    def has_solution(self) -> bool:
        """Check if primal values are available."""
        return self.status in (
            LPStatus.OPTIMAL,
            LPStatus.TIME_LIMIT,
            LPStatus.ITERATION_LIMIT,
        ) and self.objective_value is not None

    def get_value(self, column: int, default: float = 0.0) -> float:
        """Get the primal value of a column by index."""
        if 0 <= column < len(self.column_values):
            return self.column_values[column]
        return default

    def get_nonzero_values(self, tol: float = 1e-9) -> Dict[int, float]:
        """Map column index to value for columns with |value| > tol."""
        return {
            idx: value for idx, value in enumerate(self.column_values)
            if abs(value) > tol
        }

    def summary(self) -> str:
        """
        Return a human-readable summary of the solution.

        Returns:
            Summary string
        """
        lines = [
            "LPSolution:",
            f"  Status: {self.status.name}",
        ]

        if self.objective_value is not None:
            lines.append(f"  Objective: {self.objective_value:.6f}")

        lines.extend([
            f"  Rows: {self.num_rows}",
            f"  Nonzero columns: {len(self.get_nonzero_values())} / {len(self.column_values)}",
            f"  Solve time: {self.solve_time:.3f}s",
            f"  Iterations: {self.iterations}",
        ])

        return "\n".join(lines)

    def __repr__(self) -> str:
        obj_str = f", obj={self.objective_value:.4f}" if self.objective_value is not None else ""
        return f"LPSolution({self.status.name}{obj_str})"
