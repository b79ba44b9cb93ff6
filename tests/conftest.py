"""
Shared pytest fixtures for OpenRG tests.
"""

import pytest


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")


class ScriptedLP:
    """
    Stand-in for an LP engine that replays a fixed sequence of statuses.

    Records every call so tests can check how often the loop solved.
    """

    def __init__(self, statuses):
        self._statuses = list(statuses)
        self.calls = 0

    def __call__(self):
        status = self._statuses[min(self.calls, len(self._statuses) - 1)]
        self.calls += 1
        return status


class ScriptedOracle:
    """Stand-in for a separation oracle replaying a fixed sequence of answers."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.calls = 0

    def __call__(self):
        answer = self._answers[self.calls] if self.calls < len(self._answers) else False
        self.calls += 1
        return answer


@pytest.fixture
def scripted_lp():
    """Factory for ScriptedLP instances."""
    return ScriptedLP


@pytest.fixture
def scripted_oracle():
    """Factory for ScriptedOracle instances."""
    return ScriptedOracle


@pytest.fixture
def small_graph_edges():
    """
    A 5-node graph with a unique minimum spanning tree of weight 7.

    MST: (0,1,1) (1,2,2) (2,3,1) (3,4,3)
    """
    return [
        (0, 1, 1.0),
        (1, 2, 2.0),
        (2, 3, 1.0),
        (3, 4, 3.0),
        (0, 2, 4.0),
        (1, 3, 5.0),
        (0, 4, 6.0),
        (2, 4, 4.5),
    ]
