"""
Separation module - oracles that find violated rows.

Given a way to enumerate candidate constraints and a way to measure their
violation at the current LP solution, an oracle picks at most one violated
candidate per call and commits it to the LP.

This module provides:
- MaxViolatedOracle: Scans everything, adds the most violated candidate
- FirstViolatedOracle: Adds the first violated candidate in scan order
- RandomViolatedOracle: First-violated after a random rotation
- SeparationOracle: Abstract base class for custom policies
- Ordering helpers: less, identity, rotate, RandomRotate

Usage:
------
    >>> from openrg.separation import max_violated_separation_oracle
    >>> oracle = max_violated_separation_oracle(
    ...     get_candidates=lambda: family,
    ...     how_violated=lambda cut: cut.violation(x) if cut.violation(x) > 1e-9 else None,
    ...     add_violated=lambda cut: model.add_row(cut.coefficients, cut.sense, cut.rhs),
    ... )
    >>> added = oracle()

Choosing a policy:
-----------------
- max: fewest LP re-solves, full scan every round
- first: cheapest scan, weaker cuts, biased toward the front of the list
- random: first's cost profile without a fixed positional bias
"""

from openrg.separation.base import (
    NO_CANDIDATE,
    OracleStats,
    SeparationOracle,
)
from openrg.separation.factory import (
    create_oracle,
    first_violated_separation_oracle,
    max_violated_separation_oracle,
    random_violated_separation_oracle,
)
from openrg.separation.first_violated import FirstViolatedOracle
from openrg.separation.max_violated import MaxViolatedOracle
from openrg.separation.ordering import (
    RandomRotate,
    identity,
    has_measure,
    less,
    make_random_rotate,
    rotate,
)
from openrg.separation.random_violated import RandomViolatedOracle

__all__ = [
    # Base class
    'SeparationOracle',
    'OracleStats',
    'NO_CANDIDATE',

    # Policies
    'MaxViolatedOracle',
    'FirstViolatedOracle',
    'RandomViolatedOracle',

    # Factories
    'max_violated_separation_oracle',
    'first_violated_separation_oracle',
    'random_violated_separation_oracle',
    'create_oracle',

    # Ordering
    'less',
    'identity',
    'has_measure',
    'rotate',
    'RandomRotate',
    'make_random_rotate',
]
