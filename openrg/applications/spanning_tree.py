"""
Minimum Spanning Tree via Row Generation (subtour elimination).

The spanning tree polytope has one constraint per node subset, so it
cannot be written down for anything but tiny graphs. Row generation
starts from the cardinality constraint alone and adds violated subtour
constraints on demand.

Mathematical Formulation:
------------------------
    min  sum_e c_e * x_e
    s.t. sum_e x_e = n - 1                          (cardinality)
         sum_{e in E(S)} x_e <= |S| - 1             (subtour, 2 <= |S| <= n-1)
         0 <= x_e <= 1

Where:
- x_e = 1 if edge e is in the tree
- E(S) = edges with both endpoints in S

Every extreme point of this polytope is a spanning tree, so the LP
optimum reached by row generation has the weight of a minimum spanning
tree. A disconnected graph makes the full LP infeasible; row generation
discovers this after adding enough subtour rows.

Separation:
----------
Candidates are all node subsets of size 2..n-1, enumerated lazily on
every oracle call. A subset is violated when x(E(S)) exceeds |S| - 1 by
more than the violation tolerance, and the measure is that excess.

Usage:
------
    from openrg.applications import SpanningTreeInstance, solve_spanning_tree

    instance = SpanningTreeInstance(
        num_nodes=4,
        edges=[(0, 1, 1.0), (1, 2, 2.0), (2, 3, 1.0), (0, 3, 4.0), (0, 2, 3.0)],
    )
    solution = solve_spanning_tree(instance, strategy="random", seed=7)
    print(solution.objective_value, solution.tree_edges)
"""

import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

import networkx as nx

from openrg.config import config as global_config
from openrg.lp import HIGHS_AVAILABLE, HiGHSRowModel, Row, RowModel
from openrg.separation import create_oracle
from openrg.solver import RGConfig, RGSolution, RGStatus, RowGeneration

Edge = Tuple[int, int, float]


@dataclass
class SpanningTreeInstance:
    """
    A minimum spanning tree instance.

    Attributes:
        num_nodes: Number of nodes (labelled 0..num_nodes-1)
        edges: Edges as (u, v, cost)
        node_labels: Optional original labels, indexed by node number
        name: Optional instance name
    """
    num_nodes: int
    edges: List[Edge]
    node_labels: Optional[List[Any]] = None
    name: Optional[str] = None

    def __post_init__(self):
        if self.num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        for u, v, _ in self.edges:
            if not (0 <= u < self.num_nodes and 0 <= v < self.num_nodes):
                raise ValueError(f"Edge ({u}, {v}) references an unknown node")
            if u == v:
                raise ValueError(f"Self-loop on node {u} is not allowed")
        if self.node_labels is None:
            self.node_labels = list(range(self.num_nodes))
        if len(self.node_labels) != self.num_nodes:
            raise ValueError("node_labels must have one entry per node")

    @property
    def num_edges(self) -> int:
        """Number of edges."""
        return len(self.edges)

    @classmethod
    def from_networkx(
        cls,
        graph: nx.Graph,
        weight: str = "weight",
        default_weight: float = 1.0,
        name: Optional[str] = None,
    ) -> 'SpanningTreeInstance':
        """
        Build an instance from an undirected networkx graph.

        Args:
            graph: Undirected graph
            weight: Edge attribute holding the cost
            default_weight: Cost for edges without the attribute
            name: Optional instance name

        Returns:
            SpanningTreeInstance
        """
        if graph.is_directed():
            raise ValueError("Spanning trees are defined on undirected graphs")

        labels = list(graph.nodes)
        index = {label: i for i, label in enumerate(labels)}
        edges = [
            (index[u], index[v], float(data.get(weight, default_weight)))
            for u, v, data in graph.edges(data=True)
        ]
        return cls(
            num_nodes=len(labels),
            edges=edges,
            node_labels=labels,
            name=name or graph.name or None,
        )

    def to_networkx(self) -> nx.Graph:
        """Return the instance as a weighted networkx graph."""
        graph = nx.Graph(name=self.name or "")
        graph.add_nodes_from(self.node_labels)
        for u, v, cost in self.edges:
            graph.add_edge(self.node_labels[u], self.node_labels[v], weight=cost)
        return graph


def subtour_candidates(num_nodes: int) -> Iterator[FrozenSet[int]]:
    """
    Lazily enumerate every node subset of size 2..num_nodes-1.

    Subsets are produced by increasing size, then lexicographically.
    """
    for size in range(2, num_nodes):
        for subset in combinations(range(num_nodes), size):
            yield frozenset(subset)


class SubtourSeparation:
    """
    Callables wiring subtour elimination to a separation oracle.

    Each method matches one oracle argument: get_candidates,
    how_violated and add_violated. Violations are measured against the
    model's latest solution.
    """

    def __init__(
        self,
        instance: SpanningTreeInstance,
        model: RowModel,
        edge_columns: List[int],
        tolerance: Optional[float] = None,
    ):
        self._instance = instance
        self._model = model
        self._edge_columns = edge_columns
        self._tolerance = (
            global_config.get_tolerance("violation") if tolerance is None else tolerance
        )

    def _edges_inside(self, subset: FrozenSet[int]) -> List[int]:
        return [
            self._edge_columns[k]
            for k, (u, v, _) in enumerate(self._instance.edges)
            if u in subset and v in subset
        ]

    def get_candidates(self) -> Iterator[FrozenSet[int]]:
        return subtour_candidates(self._instance.num_nodes)

    def subtour_row(self, subset: FrozenSet[int]) -> Row:
        """The subtour constraint x(E(S)) <= |S| - 1 for one node subset."""
        return Row(
            coefficients={j: 1.0 for j in self._edges_inside(subset)},
            sense='<=',
            rhs=float(len(subset) - 1),
            name="subtour_" + "_".join(str(i) for i in sorted(subset)),
        )

    def how_violated(self, subset: FrozenSet[int]) -> Optional[float]:
        excess = self.subtour_row(subset).violation(self._model.values())
        if excess > self._tolerance:
            return excess
        return None

    def add_violated(self, subset: FrozenSet[int]) -> None:
        row = self.subtour_row(subset)
        self._model.add_row(row.coefficients, row.sense, row.rhs, name=row.name)


@dataclass
class SpanningTreeSolution:
    """
    Solution to a spanning tree instance.

    Attributes:
        status: Row generation termination status
        objective_value: LP objective (tree weight when optimal)
        edge_values: LP value of every edge, keyed by (u, v) node numbers
        tree_edges: Edges at value 1, as (u, v, cost)
        rows_added: Number of subtour rows added
        iterations: Number of LP solves
        total_time: Total solve time
        rg_solution: Full row generation result
    """
    status: RGStatus
    objective_value: Optional[float]
    edge_values: Dict[Tuple[int, int], float] = field(default_factory=dict)
    tree_edges: List[Edge] = field(default_factory=list)
    rows_added: int = 0
    iterations: int = 0
    total_time: float = 0.0
    rg_solution: Optional[RGSolution] = None

    @property
    def is_optimal(self) -> bool:
        """Check if the LP optimum is a proven minimum spanning tree."""
        return self.status == RGStatus.OPTIMAL

    @property
    def total_cost(self) -> float:
        """Sum of costs of the selected tree edges."""
        return sum(cost for _, _, cost in self.tree_edges)

    @property
    def is_integral(self) -> bool:
        """Check if every edge value is 0 or 1."""
        tol = global_config.get_tolerance("integrality")
        return all(
            abs(value - round(value)) <= tol
            for value in self.edge_values.values()
        )

    def tree_graph(self, instance: SpanningTreeInstance) -> nx.Graph:
        """Return the selected edges as a networkx graph over the instance's labels."""
        graph = nx.Graph()
        graph.add_nodes_from(instance.node_labels)
        for u, v, cost in self.tree_edges:
            graph.add_edge(instance.node_labels[u], instance.node_labels[v], weight=cost)
        return graph

    def summary(self) -> str:
        """Return a human-readable summary."""
        lines = [
            "Spanning Tree Solution:",
            f"  Status: {self.status.name}",
        ]
        if self.objective_value is not None:
            lines.append(f"  LP objective: {self.objective_value:.6f}")
        lines.extend([
            f"  Tree edges: {len(self.tree_edges)} (cost {self.total_cost:.6f})",
            f"  Subtour rows added: {self.rows_added}",
            f"  Iterations: {self.iterations}",
            f"  Time: {self.total_time:.3f}s",
        ])
        return "\n".join(lines)


def solve_spanning_tree(
    instance: SpanningTreeInstance,
    strategy: Optional[str] = None,
    seed: Optional[int] = None,
    config: Optional[RGConfig] = None,
    tolerance: Optional[float] = None,
    verbose: bool = False,
) -> SpanningTreeSolution:
    """
    Solve a minimum spanning tree instance by subtour row generation.

    Args:
        instance: The instance to solve
        strategy: Separation policy 'max', 'first' or 'random'
            (default: openrg.config.config.default_strategy)
        seed: Seed for the random policy
        config: Row generation configuration
        tolerance: Violation tolerance (default: config tolerance 'violation')
        verbose: Log progress at INFO

    Returns:
        SpanningTreeSolution

    Raises:
        ImportError: If highspy is not installed
        ValueError: If the strategy is unknown
    """
    if not HIGHS_AVAILABLE:
        raise ImportError(
            "HiGHS is not available. Install it with: pip install highspy"
        )

    rg_config = config or RGConfig(verbose=verbose)

    model = HiGHSRowModel(sense='min')
    edge_columns = [
        model.add_column(cost=cost, lower=0.0, upper=1.0, name=f"x_{u}_{v}")
        for u, v, cost in instance.edges
    ]
    model.add_row(
        {j: 1.0 for j in edge_columns},
        '=',
        instance.num_nodes - 1,
        name="cardinality",
    )

    separation = SubtourSeparation(instance, model, edge_columns, tolerance)
    rng = random.Random(seed) if seed is not None else None
    oracle = create_oracle(
        strategy or global_config.default_strategy,
        separation.get_candidates,
        separation.how_violated,
        separation.add_violated,
        rng=rng,
    )

    rg = RowGeneration(model.solve, oracle, rg_config)
    rg_solution = rg.solve()

    edge_values: Dict[Tuple[int, int], float] = {}
    tree_edges: List[Edge] = []
    if rg_solution.is_optimal:
        values = model.values()
        tol = global_config.get_tolerance("integrality")
        for k, (u, v, cost) in enumerate(instance.edges):
            value = values[edge_columns[k]]
            edge_values[(u, v)] = value
            if value > 1.0 - tol:
                tree_edges.append((u, v, cost))

    return SpanningTreeSolution(
        status=rg_solution.status,
        objective_value=rg_solution.objective_value,
        edge_values=edge_values,
        tree_edges=tree_edges,
        rows_added=rg_solution.rows_added,
        iterations=rg_solution.iterations,
        total_time=rg_solution.total_time,
        rg_solution=rg_solution,
    )
