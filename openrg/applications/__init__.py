"""
Application-specific implementations solved by row generation.

This package provides ready-to-use models whose constraint families are
too large to enumerate up front:
- Minimum Spanning Tree (subtour elimination)

Usage:
------
    from openrg.applications import SpanningTreeInstance, solve_spanning_tree
    instance = SpanningTreeInstance.from_networkx(graph)
    solution = solve_spanning_tree(instance, strategy="max")
"""

from openrg.applications.spanning_tree import (
    SpanningTreeInstance,
    SpanningTreeSolution,
    SubtourSeparation,
    solve_spanning_tree,
    subtour_candidates,
)

__all__ = [
    'SpanningTreeInstance',
    'SpanningTreeSolution',
    'SubtourSeparation',
    'solve_spanning_tree',
    'subtour_candidates',
]
