"""
Row model abstract base class.

This module defines the LP-side contract consumed by row generation.
The row generation loop only needs two things from an LP:

- a way to (re)solve it and read a status
- a way to append one more row

RowModel packages both, keeps a record of every column and row added, and
exposes ready-made callables for the loop. Users can either:
1. Use the provided HiGHSRowModel (default implementation)
2. Implement their own by subclassing RowModel

Customization Guide:
-------------------
To back a RowModel with a different solver:

1. Subclass RowModel
2. Implement _build_model, _add_column_impl, _add_row_impl, _solve_impl
3. Optionally override the _before_solve / _after_solve hooks

Example:
    >>> class MyGurobiRowModel(RowModel):
    ...     def _build_model(self) -> None:
    ...         self._model = gurobipy.Model()
    ...
    ...     def _add_row_impl(self, row: Row) -> int:
    ...         # Add linear constraint to Gurobi
    ...         ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from openrg.lp.solution import LPSolution, LPStatus

VALID_SENSES = ('<=', '>=', '=')


@dataclass(frozen=True)
class ColumnSpec:
    """
    A structural variable of the LP.

    Attributes:
        cost: Objective coefficient
        lower: Lower bound
        upper: Upper bound (None = +infinity)
        name: Optional display name
    """
    cost: float
    lower: float = 0.0
    upper: Optional[float] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Row:
    """
    A linear constraint: sum(coefficients[j] * x_j) {<=, >=, =} rhs.

    Attributes:
        coefficients: Mapping from column index to coefficient
        sense: One of '<=', '>=', '='
        rhs: Right-hand side
        name: Optional display name
    """
    coefficients: Mapping[int, float] = field(default_factory=dict)
    sense: str = '<='
    rhs: float = 0.0
    name: Optional[str] = None

    def activity(self, values: List[float]) -> float:
        """Evaluate the left-hand side at a primal point."""
        return sum(
            coeff * values[j]
            for j, coeff in self.coefficients.items()
            if j < len(values)
        )

    def violation(self, values: List[float]) -> float:
        """
        Amount by which a primal point violates this row.

        Returns:
            Positive number if violated, zero or negative otherwise
        """
        lhs = self.activity(values)
        if self.sense == '<=':
            return lhs - self.rhs
        if self.sense == '>=':
            return self.rhs - lhs
        return abs(lhs - self.rhs)


class RowModel(ABC):
    """
    Abstract base class for LPs grown one row at a time.

    Lifecycle:
    ---------
    1. Create: model = HiGHSRowModel()
    2. Add columns: model.add_column(cost=..., upper=1.0)
    3. Add initial rows: model.add_row({0: 1.0, 1: 1.0}, '=', 1.0)
    4. Solve: solution = model.solve()
    5. Add a violated row and re-solve, repeated by the row generation loop

    Attributes:
        sense: Objective sense ('min' or 'max')
    """

    def __init__(self, sense: str = 'min'):
        """
        Initialize the row model.

        Args:
            sense: Objective sense, 'min' or 'max'

        Raises:
            ValueError: If sense is not 'min' or 'max'
        """
        if sense not in ('min', 'max'):
            raise ValueError(f"Objective sense must be 'min' or 'max', got {sense!r}")

        self._sense = sense
        self._columns: List[ColumnSpec] = []
        self._rows: List[Row] = []
        self._row_name_to_index: Dict[str, int] = {}
        self._last_solution: Optional[LPSolution] = None

        self._build_model()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def sense(self) -> str:
        """Objective sense."""
        return self._sense

    @property
    def num_columns(self) -> int:
        """Number of structural columns."""
        return len(self._columns)

    @property
    def num_rows(self) -> int:
        """Number of rows currently in the model."""
        return len(self._rows)

    @property
    def columns(self) -> List[ColumnSpec]:
        """Columns in insertion order."""
        return self._columns.copy()

    @property
    def rows(self) -> List[Row]:
        """Rows in insertion order."""
        return self._rows.copy()

    @property
    def last_solution(self) -> Optional[LPSolution]:
        """The most recent solve result (None before the first solve)."""
        return self._last_solution

    # =========================================================================
    # Abstract Methods (MUST be implemented by subclasses)
    # =========================================================================

    @abstractmethod
    def _build_model(self) -> None:
        """Create the empty solver model and set the objective sense."""
        pass

    @abstractmethod
    def _add_column_impl(self, column: ColumnSpec) -> int:
        """
        Add a column to the solver model.

        Returns:
            The index of the column in the solver model
        """
        pass

    @abstractmethod
    def _add_row_impl(self, row: Row) -> int:
        """
        Add a row to the solver model.

        Returns:
            The index of the row in the solver model
        """
        pass

    @abstractmethod
    def _solve_impl(self) -> LPSolution:
        """
        Solve the current LP.

        Returns:
            LPSolution with status, objective and primal values
        """
        pass

    # =========================================================================
    # Hooks
    # =========================================================================

    def _before_solve(self) -> None:
        """Called before each solve."""
        pass

    def _after_solve(self, solution: LPSolution) -> LPSolution:
        """Called after each solve; may replace the solution."""
        return solution

    # =========================================================================
    # Public API
    # =========================================================================

    def add_column(
        self,
        cost: float,
        lower: float = 0.0,
        upper: Optional[float] = None,
        name: Optional[str] = None,
    ) -> int:
        """
        Add a structural column.

        Args:
            cost: Objective coefficient
            lower: Lower bound
            upper: Upper bound (None = +infinity)
            name: Optional display name

        Returns:
            Index of the new column

        Raises:
            ValueError: If lower > upper
        """
        if upper is not None and lower > upper:
            raise ValueError(f"Column bounds are inverted: [{lower}, {upper}]")

        column = ColumnSpec(cost=float(cost), lower=float(lower), upper=upper, name=name)
        idx = len(self._columns)
        self._columns.append(column)
        self._add_column_impl(column)
        return idx

    def add_row(
        self,
        coefficients: Mapping[int, float],
        sense: str,
        rhs: float,
        name: Optional[str] = None,
    ) -> int:
        """
        Append a row to the LP.

        Args:
            coefficients: Mapping from column index to coefficient
            sense: One of '<=', '>=', '='
            rhs: Right-hand side
            name: Optional display name

        Returns:
            Index of the new row

        Raises:
            ValueError: If the sense is invalid or a column index is unknown
        """
        if sense not in VALID_SENSES:
            raise ValueError(f"Row sense must be one of {VALID_SENSES}, got {sense!r}")
        for j in coefficients:
            if not 0 <= j < len(self._columns):
                raise ValueError(f"Row references unknown column {j}")

        row = Row(
            coefficients={j: float(c) for j, c in coefficients.items() if c != 0.0},
            sense=sense,
            rhs=float(rhs),
            name=name,
        )
        idx = len(self._rows)
        self._rows.append(row)
        if name is not None:
            self._row_name_to_index[name] = idx
        self._add_row_impl(row)
        return idx

    def has_row(self, name: str) -> bool:
        """Check whether a row with this name has been added."""
        return name in self._row_name_to_index

    def solve(self) -> LPSolution:
        """
        Solve the current LP.

        Returns:
            LPSolution with status, objective and primal values
        """
        self._before_solve()
        solution = self._solve_impl()
        solution = self._after_solve(solution)
        self._last_solution = solution
        return solution

    def solve_status(self) -> LPStatus:
        """Solve the current LP and return only its status."""
        return self.solve().status

    def value(self, column: int, default: float = 0.0) -> float:
        """
        Primal value of a column in the last solution.

        Args:
            column: Column index
            default: Returned if there is no solution yet

        Returns:
            The column value
        """
        if self._last_solution is None:
            return default
        return self._last_solution.get_value(column, default)

    def values(self) -> List[float]:
        """Primal values of all columns in the last solution."""
        if self._last_solution is None:
            return [0.0] * len(self._columns)
        return list(self._last_solution.column_values)

    def row_adder(
        self,
        make_row: Callable[[object], Row],
    ) -> Callable[[object], None]:
        """
        Build an add_violated callable from a candidate-to-row mapping.

        Args:
            make_row: Function turning a candidate into a Row

        Returns:
            Callable suitable as a separation oracle's add_violated
        """
        def add_violated(candidate: object) -> None:
            row = make_row(candidate)
            self.add_row(row.coefficients, row.sense, row.rhs, row.name)

        return add_violated

    def summary(self) -> str:
        """
        Return a human-readable summary.

        Returns:
            Summary string
        """
        lines = [
            f"{type(self).__name__}:",
            f"  Sense: {self._sense}",
            f"  Columns: {self.num_columns}",
            f"  Rows: {self.num_rows}",
        ]
        if self._last_solution is not None:
            lines.append(f"  Last status: {self._last_solution.status.name}")
            if self._last_solution.objective_value is not None:
                lines.append(f"  Last objective: {self._last_solution.objective_value:.6f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sense={self._sense!r}, "
            f"columns={self.num_columns}, rows={self.num_rows})"
        )
