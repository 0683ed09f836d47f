"""Crowding distance assignment for a single Pareto front.

Crowding distance measures how isolated a solution is in objective space.
Higher values indicate more isolated solutions (preferred for diversity).

For every objective the front is sorted by that objective's order. The two
extreme solutions receive infinite distance, and every interior solution
accumulates the distance between its two neighbours, normalized by the
objective's spread and by the number of objectives.
"""

import logging
import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from nsga_select.fronts import Front
from nsga_select.objectives import MultiObjective, Objective

logger = logging.getLogger(__name__)


@dataclass
class AssignedCrowdingDistance:
    """Crowding distance assigned to one solution of a front.

    Attributes:
        index: Original index of the solution in the population.
        solution: Reference to the solution.
        rank: Rank of the front the solution belongs to.
        crowding_distance: Accumulated crowding distance, >= 0 or +inf for
            boundary solutions.
    """

    index: int
    solution: Any
    rank: int
    crowding_distance: float = 0.0


@dataclass(frozen=True)
class ObjectiveStat:
    """Per-objective summary of one front.

    Attributes:
        spread: Absolute distance between the two extreme solutions of the
            front under this objective.
    """

    spread: float


def _checked_distance(objective: Objective, a: Any, b: Any, position: int) -> float:
    d = abs(objective.distance(a, b))
    if not math.isfinite(d):
        raise ValueError(f"objective {position} ({objective!r}) returned non-finite distance {d}")
    return d


def assign_crowding_distance(
    front: Front,
    multi_objective: MultiObjective,
) -> tuple[list[AssignedCrowdingDistance], list[ObjectiveStat]]:
    """Assign a crowding distance to each solution in a front.

    Args:
        front: The front to process. All records carry its rank.
        multi_objective: Objectives to compute distances on.

    Returns:
        Tuple of (assigned, stats) where:
        - assigned: One AssignedCrowdingDistance per member of the front, in the
          order left by the sort on the last objective.
        - stats: One ObjectiveStat per objective, in objective order.
          Empty if the front is empty.

    Raises:
        ValueError: If an objective's distance function returns NaN or inf.

    Examples:
        >>> from nsga_select.fronts import Front, FrontMember
        >>> mo = MultiObjective.from_columns(2)
        >>> members = [FrontMember(i, s) for i, s in enumerate([(1, 5), (3, 3), (5, 1)])]
        >>> assigned, stats = assign_crowding_distance(Front(0, members), mo)
        >>> [a.crowding_distance for a in sorted(assigned, key=lambda a: a.index)]
        [inf, 1.0, inf]
        >>> [s.spread for s in stats]
        [4.0, 4.0]
    """
    assigned = [
        AssignedCrowdingDistance(index=m.index, solution=m.solution, rank=front.rank)
        for m in front.members
    ]

    if len(assigned) == 0:
        return assigned, []

    n_obj = len(multi_objective)
    stats: list[ObjectiveStat] = []

    for position, objective in enumerate(multi_objective):
        # list.sort is stable, so ties keep the order left by the previous objective
        assigned.sort(key=cmp_to_key(lambda a, b: objective.total_order(a.solution, b.solution)))

        # Boundary solutions get infinite distance
        assigned[0].crowding_distance = math.inf
        assigned[-1].crowding_distance = math.inf

        spread = _checked_distance(objective, assigned[0].solution, assigned[-1].solution, position)
        stats.append(ObjectiveStat(spread=spread))

        if spread > 0:
            norm = 1.0 / (spread * n_obj)
            for i in range(1, len(assigned) - 1):
                neighbor_dist = _checked_distance(
                    objective, assigned[i + 1].solution, assigned[i - 1].solution, position
                )
                assigned[i].crowding_distance += neighbor_dist * norm
        elif len(assigned) > 2:
            logger.debug("objective %d has zero spread on front %d, no interior contribution", position, front.rank)

    return assigned, stats
