"""
First-violated separation oracle.

Scans the candidates in (optionally reordered) order and adds the first
violated one, stopping there. Costs k how_violated calls, where k is the
position of the first violated candidate in the scan order.
"""

from typing import Any, Callable, Iterable

from openrg.separation.base import (
    NO_CANDIDATE,
    AddViolated,
    GetCandidates,
    HowViolated,
    SeparationOracle,
)
from openrg.separation.ordering import identity

ReorderCandidates = Callable[[Iterable[Any]], Iterable[Any]]


class FirstViolatedOracle(SeparationOracle):
    """
    Adds the first violated candidate in scan order.

    With the default identity reorder, lazy candidate iterables are
    consumed only up to the first violated candidate.
    """

    name = 'first_violated'

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
        reorder_candidates: ReorderCandidates = identity,
    ):
        """
        Args:
            get_candidates: Enumerates candidate constraints
            how_violated: Violation test (any falsy result = not violated)
            add_violated: Commits one candidate to the LP
            reorder_candidates: Transform applied to the candidates before
                scanning (default: identity)
        """
        super().__init__(get_candidates, how_violated, add_violated)
        self._reorder_candidates = reorder_candidates

    @property
    def reorder_candidates(self) -> ReorderCandidates:
        """The reorder transform."""
        return self._reorder_candidates

    def _separate(self) -> Any:
        candidates = self._reorder_candidates(self._get_candidates())
        for candidate in candidates:
            if self._evaluate(candidate):
                return candidate
        return NO_CANDIDATE
