"""
Tests for the LP collaborator.

This module tests:
- LPSolution and LPStatus
- Row activity and violation
- RowModel validation
- HiGHSRowModel solving (skipped without highspy)
"""

import pytest

from openrg.lp import HIGHS_AVAILABLE, LPSolution, LPStatus, Row


# =============================================================================
# Test LPSolution
# =============================================================================

class TestLPSolution:
    """Tests for LPSolution."""

    def test_status_flags(self):
        """Test the status convenience properties."""
        assert LPSolution(status=LPStatus.OPTIMAL).is_optimal
        assert LPSolution(status=LPStatus.INFEASIBLE).is_infeasible
        assert LPSolution(status=LPStatus.UNBOUNDED).is_unbounded
        assert not LPSolution(status=LPStatus.ERROR).is_optimal

    def test_values(self):
        """Test value access."""
        sol = LPSolution(
            status=LPStatus.OPTIMAL,
            objective_value=3.0,
            column_values=[0.0, 1.0, 0.5],
        )

        assert sol.has_solution
        assert sol.get_value(1) == 1.0
        assert sol.get_value(7, default=-1.0) == -1.0
        assert sol.get_nonzero_values() == {1: 1.0, 2: 0.5}

    def test_no_solution(self):
        """Test an empty result."""
        sol = LPSolution(status=LPStatus.INFEASIBLE)
        assert not sol.has_solution
        assert sol.get_value(0) == 0.0


# =============================================================================
# Test Row
# =============================================================================

class TestRow:
    """Tests for Row."""

    def test_activity(self):
        """Test left-hand side evaluation."""
        row = Row({0: 1.0, 2: 2.0}, '<=', 3.0)
        assert row.activity([1.0, 5.0, 0.5]) == 2.0

    @pytest.mark.parametrize("sense,rhs,expected", [
        ('<=', 1.0, 1.0),
        ('>=', 1.0, -1.0),
        ('>=', 3.0, 1.0),
        ('=', 3.0, 1.0),
    ])
    def test_violation(self, sense, rhs, expected):
        """Test violation by sense."""
        row = Row({0: 1.0, 1: 1.0}, sense, rhs)
        assert row.violation([1.0, 1.0]) == pytest.approx(expected)


# =============================================================================
# Test HiGHSRowModel
# =============================================================================

@pytest.mark.skipif(not HIGHS_AVAILABLE, reason="highspy not installed")
class TestHiGHSRowModel:
    """Tests for HiGHSRowModel."""

    @pytest.fixture
    def model(self):
        from openrg.lp import HiGHSRowModel
        return HiGHSRowModel(sense='min')

    def test_invalid_sense(self):
        """Test that an unknown objective sense raises."""
        from openrg.lp import HiGHSRowModel
        with pytest.raises(ValueError):
            HiGHSRowModel(sense='minimize')

    def test_solve_small_lp(self, model):
        """Test solving min x + 2y s.t. x + y >= 1."""
        x = model.add_column(cost=1.0, upper=1.0)
        y = model.add_column(cost=2.0, upper=1.0)
        model.add_row({x: 1.0, y: 1.0}, '>=', 1.0, name="cover")

        solution = model.solve()

        assert solution.status == LPStatus.OPTIMAL
        assert solution.objective_value == pytest.approx(1.0)
        assert model.value(x) == pytest.approx(1.0)
        assert model.value(y) == pytest.approx(0.0)
        assert model.last_solution is solution
        assert model.has_row("cover")

    def test_rows_added_after_solve(self, model):
        """Test that a row added after a solve changes the optimum."""
        x = model.add_column(cost=-1.0, upper=10.0)
        y = model.add_column(cost=-1.0, upper=10.0)

        assert model.solve_status() == LPStatus.OPTIMAL
        assert model.last_solution.objective_value == pytest.approx(-20.0)

        model.add_row({x: 1.0, y: 1.0}, '<=', 4.0)
        assert model.solve_status() == LPStatus.OPTIMAL
        assert model.last_solution.objective_value == pytest.approx(-4.0)
        assert model.num_rows == 1

    def test_infeasible(self, model):
        """Test that an infeasible LP is reported."""
        x = model.add_column(cost=1.0, upper=1.0)
        model.add_row({x: 1.0}, '>=', 2.0)

        assert model.solve_status() == LPStatus.INFEASIBLE

    def test_unbounded(self):
        """Test that an unbounded LP is reported."""
        from openrg.lp import HiGHSRowModel
        model = HiGHSRowModel(sense='max')
        x = model.add_column(cost=1.0)
        y = model.add_column(cost=0.0)
        model.add_row({x: 1.0, y: -1.0}, '<=', 1.0)

        assert model.solve_status() in (LPStatus.UNBOUNDED, LPStatus.INF_OR_UNBOUNDED)

    def test_add_row_validation(self, model):
        """Test that bad rows are rejected."""
        model.add_column(cost=1.0)

        with pytest.raises(ValueError):
            model.add_row({0: 1.0}, '<', 1.0)
        with pytest.raises(ValueError):
            model.add_row({3: 1.0}, '<=', 1.0)
        assert model.num_rows == 0

    def test_add_column_validation(self, model):
        """Test that inverted bounds are rejected."""
        with pytest.raises(ValueError):
            model.add_column(cost=1.0, lower=2.0, upper=1.0)

    def test_zero_coefficients_dropped(self, model):
        """Test that zero coefficients are not stored."""
        model.add_column(cost=1.0)
        model.add_column(cost=1.0)
        model.add_row({0: 1.0, 1: 0.0}, '<=', 1.0)

        assert model.rows[0].coefficients == {0: 1.0}

    def test_values_before_solve(self, model):
        """Test that values are zero before the first solve."""
        model.add_column(cost=1.0)
        assert model.values() == [0.0]
        assert model.value(0) == 0.0

    def test_row_adder(self, model):
        """Test building add_violated from a row factory."""
        x = model.add_column(cost=-1.0, upper=5.0)
        add = model.row_adder(lambda bound: Row({x: 1.0}, '<=', bound, name=f"cap_{bound}"))

        add(2.0)
        model.solve()

        assert model.has_row("cap_2.0")
        assert model.value(x) == pytest.approx(2.0)

    def test_time_limit(self, model):
        """Test setting the solver time limit between solves."""
        assert model.time_limit is None

        x = model.add_column(cost=1.0, upper=1.0)
        model.add_row({x: 1.0}, '>=', 0.5)
        model.set_time_limit(30.0)

        assert model.time_limit == 30.0
        assert model.solve_status() == LPStatus.OPTIMAL
        assert model.value(x) == pytest.approx(0.5)

    def test_time_limit_in_constructor(self):
        """Test passing the time limit at construction."""
        from openrg.lp import HiGHSRowModel
        model = HiGHSRowModel(time_limit=10.0)
        assert model.time_limit == 10.0

    def test_model_stats(self, model):
        """Test model statistics."""
        model.add_column(cost=1.0)
        model.add_column(cost=1.0)
        model.add_row({0: 1.0, 1: 1.0}, '>=', 1.0)

        stats = model.get_model_stats()
        assert stats['num_columns'] == 2
        assert stats['num_rows'] == 1
        assert stats['num_nonzeros'] == 2
