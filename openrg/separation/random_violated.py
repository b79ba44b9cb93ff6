"""
Random-violated separation oracle.

A first-violated oracle whose scan starts at a random position: before
each scan the candidate list is left-rotated by an offset drawn uniformly
from [0, len]. Over many invocations no region of the candidate space is
favoured by the enumeration order, while each scan still stops at the
first violation.
"""

import random
from typing import Optional

from openrg.separation.base import AddViolated, GetCandidates, HowViolated
from openrg.separation.first_violated import FirstViolatedOracle
from openrg.separation.ordering import RandomRotate, make_random_rotate


class RandomViolatedOracle(FirstViolatedOracle):
    """
    Adds the first violated candidate after a random rotation.

    The oracle owns its generator. Every invocation advances it, so a
    fixed seed reproduces the whole sequence of scan orders.
    """

    name = 'random_violated'

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            get_candidates: Enumerates candidate constraints
            how_violated: Violation test (any falsy result = not violated)
            add_violated: Commits one candidate to the LP
            rng: Random generator to own (default: seeded from config.seed)
        """
        super().__init__(
            get_candidates,
            how_violated,
            add_violated,
            reorder_candidates=make_random_rotate(rng),
        )

    @property
    def rotation(self) -> RandomRotate:
        """The random rotation transform."""
        return self._reorder_candidates

    @property
    def last_offset(self) -> Optional[int]:
        """Rotation offset used by the most recent invocation."""
        return self._reorder_candidates.last_offset
