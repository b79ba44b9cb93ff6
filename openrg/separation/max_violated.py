"""
Max-violated separation oracle.

Scans every candidate and adds the one whose violation measure is the
greatest under a strict comparator. Ties go to the first candidate
encountered: a later candidate replaces the current best only when
compare_how(best, candidate) is True.

Cost: one full pass (one how_violated call per candidate) per invocation.
This usually means fewer LP re-solves than the first-violated policy.
"""

from typing import Any, Callable

from openrg.separation.base import (
    NO_CANDIDATE,
    AddViolated,
    GetCandidates,
    HowViolated,
    SeparationOracle,
)
from openrg.separation.ordering import has_measure, less

CompareHow = Callable[[Any, Any], bool]


class MaxViolatedOracle(SeparationOracle):
    """
    Adds the most violated candidate.

    Example:
        >>> measures = {'a': 3, 'b': 7, 'c': 2, 'd': 7}
        >>> added = []
        >>> oracle = MaxViolatedOracle(
        ...     lambda: list(measures),
        ...     measures.get,
        ...     added.append,
        ... )
        >>> oracle()
        True
        >>> added
        ['b']
    """

    name = 'max_violated'

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
        compare_how: CompareHow = less,
    ):
        """
        Args:
            get_candidates: Enumerates candidate constraints
            how_violated: Measures violation of one candidate (None = not violated)
            add_violated: Commits one candidate to the LP
            compare_how: Strict weak ordering over measures (default: a < b)
        """
        super().__init__(get_candidates, how_violated, add_violated)
        self._compare_how = compare_how

    def _separate(self) -> Any:
        best = NO_CANDIDATE
        best_how = None

        for candidate in self._get_candidates():
            how = self._evaluate(candidate)
            if not has_measure(how):
                continue
            if best is NO_CANDIDATE or self._compare_how(best_how, how):
                best = candidate
                best_how = how

        return best
