"""Pareto fronts and the default front producer.

This module provides:
- FrontMember / Front: records describing one ranked front of a population
- FrontProducer: protocol for anything that partitions a population into fronts
- dominates: scalar Pareto dominance check over a MultiObjective
- dominance_matrix: pairwise dominance for a whole population
- non_dominated_fronts: Deb's fast non-dominated sorting, yielding fronts lazily
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from nsga_select.objectives import MultiObjective


@dataclass(frozen=True)
class FrontMember:
    """A solution together with its position in the input population.

    Attributes:
        index: Original index of the solution in the population.
        solution: Reference to the solution itself.
    """

    index: int
    solution: Any


@dataclass(frozen=True)
class Front:
    """A set of solutions sharing one dominance rank.

    Attributes:
        rank: Front rank. Rank 0 is the non-dominated front.
        members: Ordered members of the front.

    Example:
        >>> front = Front(rank=0, members=(FrontMember(0, (1.0, 2.0)),))
        >>> len(front)
        1
    """

    rank: int
    members: tuple[FrontMember, ...]

    def __post_init__(self) -> None:
        if self.rank < 0:
            raise ValueError(f"rank must be non-negative, got {self.rank}")
        object.__setattr__(self, "members", tuple(self.members))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[FrontMember]:
        return iter(self.members)

    @property
    def indices(self) -> np.ndarray:
        """Original population indices of the members, shape (len(front),)."""
        return np.array([m.index for m in self.members], dtype=np.intp)


@runtime_checkable
class FrontProducer(Protocol):
    """Protocol for non-dominated sorting strategies.

    A front producer receives the population and the objectives and yields
    fronts in strictly increasing rank order. Together the fronts must
    partition the population: every solution appears in exactly one front,
    tagged with its original index.
    """

    def __call__(self, solutions: Sequence[Any], multi_objective: MultiObjective) -> Iterator[Front]:
        ...


def dominates(a: Any, b: Any, multi_objective: MultiObjective) -> bool:
    """Check if solution a Pareto-dominates solution b.

    A solution a dominates b if and only if a is no worse than b on every
    objective and strictly better on at least one. Better means earlier in
    the objective's total order.

    Args:
        a: First solution.
        b: Second solution.
        multi_objective: Objectives to compare on.

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> mo = MultiObjective.from_columns(2)
        >>> dominates((1.0, 2.0), (2.0, 3.0), mo)
        True
        >>> dominates((1.0, 3.0), (2.0, 2.0), mo)
        False
    """
    strictly_better = False
    for objective in multi_objective:
        order = objective.total_order(a, b)
        if order > 0:
            return False
        if order < 0:
            strictly_better = True
    return strictly_better


def dominance_matrix(solutions: Sequence[Any], multi_objective: MultiObjective) -> np.ndarray:
    """Compute pairwise dominance for all solutions.

    Args:
        solutions: Population of solutions, length n.
        multi_objective: Objectives to compare on.

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        solution i dominates solution j.
    """
    n = len(solutions)
    n_obj = len(multi_objective)

    # order[m, i, j] = sign of total_order(solutions[i], solutions[j]) on objective m
    order = np.zeros((n_obj, n, n), dtype=np.int8)
    for m, objective in enumerate(multi_objective):
        for i in range(n):
            for j in range(i + 1, n):
                c = int(np.sign(objective.total_order(solutions[i], solutions[j])))
                order[m, i, j] = c
                order[m, j, i] = -c

    all_leq = np.all(order <= 0, axis=0)
    any_lt = np.any(order < 0, axis=0)

    return all_leq & any_lt


def non_dominated_fronts(solutions: Sequence[Any], multi_objective: MultiObjective) -> Iterator[Front]:
    """Partition a population into Pareto fronts using Deb's fast algorithm.

    Fronts are produced lazily, rank 0 first. Time complexity of building the
    dominance matrix is O(M * N^2) objective comparisons, where M is the
    number of objectives and N the population size.

    Args:
        solutions: Population of solutions.
        multi_objective: Objectives to sort on.

    Yields:
        Front objects in increasing rank order. Members of each front are
        listed in ascending original index.

    Examples:
        >>> mo = MultiObjective.from_columns(2)
        >>> [f.indices.tolist() for f in non_dominated_fronts([(1, 1), (2, 2), (1, 3)], mo)]
        [[0], [1, 2]]
    """
    n = len(solutions)
    if n == 0:
        return

    dom = dominance_matrix(solutions, multi_objective)

    # domination_count[i] = number of solutions that dominate i
    domination_count = dom.sum(axis=0).astype(np.int64)

    current_rank = 0
    remaining = np.arange(n)

    while len(remaining) > 0:
        front_mask = domination_count[remaining] == 0
        front = remaining[front_mask]

        if len(front) == 0:
            # Cyclic dominance can only come from an inconsistent total order
            raise RuntimeError(
                f"objectives do not define a consistent order: {len(remaining)} solutions remain "
                f"without a non-dominated member at rank {current_rank}"
            )

        remaining = remaining[~front_mask]
        for idx in front:
            domination_count[remaining] -= dom[idx, remaining].astype(np.int64)

        yield Front(
            rank=current_rank,
            members=tuple(FrontMember(int(i), solutions[int(i)]) for i in front),
        )
        current_rank += 1
