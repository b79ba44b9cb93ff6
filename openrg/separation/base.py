"""
Separation oracle abstract base class.

A separation oracle is the "try add violated" half of row generation.
Each invocation enumerates the candidate constraints afresh, looks for a
violated one according to its policy, and commits at most one of them to
the LP.

Callable contracts:
------------------
- get_candidates: () -> finite iterable of candidates (may be lazy)
- how_violated: (candidate) -> measure, or None when not violated
- add_violated: (candidate) -> None, appends the row to the LP

Customization Guide:
-------------------
To add a new policy:

1. Subclass SeparationOracle
2. Implement _separate(), returning the candidate to add or NO_CANDIDATE
3. Use self._evaluate(candidate) so that statistics stay accurate
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)

GetCandidates = Callable[[], Iterable[Any]]
HowViolated = Callable[[Any], Any]
AddViolated = Callable[[Any], None]

# Sentinel for "nothing to add"; candidates themselves may be None
NO_CANDIDATE = object()


@dataclass
class OracleStats:
    """
    Counters accumulated across oracle invocations.

    Attributes:
        calls: Number of invocations
        candidates_evaluated: Number of how_violated calls
        rows_added: Number of add_violated calls
    """
    calls: int = 0
    candidates_evaluated: int = 0
    rows_added: int = 0

    def reset(self) -> None:
        """Zero all counters."""
        self.calls = 0
        self.candidates_evaluated = 0
        self.rows_added = 0


class SeparationOracle(ABC):
    """
    Abstract base class for separation oracles.

    Calling the oracle returns True if a violated candidate was found and
    added, False if every candidate satisfies its constraint.

    Attributes:
        stats: Invocation counters
    """

    name = 'oracle'

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
    ):
        """
        Initialize the oracle.

        Args:
            get_candidates: Enumerates candidate constraints
            how_violated: Measures violation of one candidate
            add_violated: Commits one candidate to the LP
        """
        self._get_candidates = get_candidates
        self._how_violated = how_violated
        self._add_violated = add_violated
        self.stats = OracleStats()

    @abstractmethod
    def _separate(self) -> Any:
        """
        Search the candidates for one to add.

        Returns:
            The selected candidate, or NO_CANDIDATE
        """
        pass

    def _evaluate(self, candidate: Any) -> Any:
        """Call how_violated and count it."""
        self.stats.candidates_evaluated += 1
        return self._how_violated(candidate)

    def __call__(self) -> bool:
        self.stats.calls += 1
        selected = self._separate()
        if selected is NO_CANDIDATE:
            logger.debug("%s: no violated candidate", self.name)
            return False

        logger.debug("%s: adding candidate %r", self.name, selected)
        self._add_violated(selected)
        self.stats.rows_added += 1
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(calls={self.stats.calls}, "
            f"rows_added={self.stats.rows_added})"
        )
