"""
Factory functions for separation oracles.

These mirror the oracle constructors and let callers pick a policy by
name, e.g. from a configuration file.
"""

import random
from typing import Optional

from openrg.separation.base import (
    AddViolated,
    GetCandidates,
    HowViolated,
    SeparationOracle,
)
from openrg.separation.first_violated import FirstViolatedOracle, ReorderCandidates
from openrg.separation.max_violated import CompareHow, MaxViolatedOracle
from openrg.separation.ordering import identity, less
from openrg.separation.random_violated import RandomViolatedOracle


def max_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    compare_how: CompareHow = less,
) -> MaxViolatedOracle:
    """Build an oracle adding the most violated candidate."""
    return MaxViolatedOracle(get_candidates, how_violated, add_violated, compare_how)


def first_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    reorder_candidates: ReorderCandidates = identity,
) -> FirstViolatedOracle:
    """Build an oracle adding the first violated candidate."""
    return FirstViolatedOracle(
        get_candidates, how_violated, add_violated, reorder_candidates
    )


def random_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    rng: Optional[random.Random] = None,
) -> RandomViolatedOracle:
    """Build an oracle adding the first violated candidate after a random rotation."""
    return RandomViolatedOracle(get_candidates, how_violated, add_violated, rng)


def create_oracle(
    name: str,
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    compare_how: CompareHow = less,
    reorder_candidates: ReorderCandidates = identity,
    rng: Optional[random.Random] = None,
) -> SeparationOracle:
    """
    Create a separation oracle by policy name.

    Args:
        name: 'max', 'first' or 'random' (the '_violated' suffix is accepted)
        get_candidates: Enumerates candidate constraints
        how_violated: Measures violation of one candidate
        add_violated: Commits one candidate to the LP
        compare_how: Comparator for the max policy
        reorder_candidates: Reorder transform for the first policy
        rng: Random generator for the random policy

    Returns:
        The configured oracle

    Raises:
        ValueError: If the name is unknown
    """
    name_lower = name.lower().replace('-', '_')
    if name_lower.endswith('_violated'):
        name_lower = name_lower[:-len('_violated')]

    if name_lower == 'max':
        return MaxViolatedOracle(get_candidates, how_violated, add_violated, compare_how)
    elif name_lower == 'first':
        return FirstViolatedOracle(
            get_candidates, how_violated, add_violated, reorder_candidates
        )
    elif name_lower == 'random':
        return RandomViolatedOracle(get_candidates, how_violated, add_violated, rng)
    raise ValueError(
        f"Unknown separation strategy {name!r}; expected 'max', 'first' or 'random'"
    )
