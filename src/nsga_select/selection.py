"""NSGA-II environmental selection.

This module implements the NSGA-II truncation selection which uses Pareto
ranking and crowding distance to select exactly n solutions for the next
generation:

1. Fronts are consumed in rank order, whole fronts admitted while they fit
2. The first front that does not fit is sorted by crowding distance
   (descending) and only its most isolated members are admitted
"""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from nsga_select.crowding import AssignedCrowdingDistance, assign_crowding_distance
from nsga_select.fronts import FrontProducer, non_dominated_fronts
from nsga_select.objectives import MultiObjective, Objective, as_multi_objective

logger = logging.getLogger(__name__)


def _sort_by_crowding_distance(assigned: list[AssignedCrowdingDistance]) -> list[AssignedCrowdingDistance]:
    """Order records by crowding distance, highest first.

    Raises:
        ValueError: If any crowding distance is NaN.
    """
    cd = np.array([a.crowding_distance for a in assigned], dtype=np.float64)
    if np.any(np.isnan(cd)):
        bad = [a.index for a, d in zip(assigned, cd) if np.isnan(d)]
        raise ValueError(f"crowding distance is NaN for solutions {bad}")
    # Stable sort on the negated values keeps ties in their current order
    order = np.argsort(-cd, kind="stable")
    return [assigned[i] for i in order]


def select_and_rank(
    solutions: Sequence[Any],
    n: int,
    multi_objective: MultiObjective | Sequence[Objective],
    front_producer: FrontProducer = non_dominated_fronts,
) -> list[AssignedCrowdingDistance]:
    """Select n solutions using NSGA-II front filling and crowding truncation.

    Solutions are sorted into Pareto fronts by the front producer. Whole fronts
    are admitted in rank order until the next one no longer fits. That last
    front is sorted by crowding distance (higher is better) and its members
    are admitted until exactly n solutions are selected.

    Args:
        solutions: The current population.
        n: Number of solutions to select. Values above the population size are
            clamped to it.
        multi_objective: Objectives used for sorting and crowding distance.
        front_producer: Non-dominated sorting strategy. Defaults to
            non_dominated_fronts.

    Returns:
        List of min(n, len(solutions)) AssignedCrowdingDistance records. Whole
        fronts appear first, in rank order, followed by the truncated front's
        highest crowding distance members.

    Raises:
        ValueError: If n is negative or an objective returns a non-finite distance.
        RuntimeError: If the front producer does not partition the population
            or yields fronts out of rank order.

    Example:
        >>> mo = MultiObjective.from_columns(2)
        >>> population = [(1.0, 4.0), (2.0, 3.0), (3.0, 2.0), (4.0, 1.0)]
        >>> sorted(a.index for a in select_and_rank(population, 2, mo))
        [0, 3]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    multi_objective = as_multi_objective(multi_objective)

    # Cannot select more solutions than we have
    target = min(n, len(solutions))
    result: list[AssignedCrowdingDistance] = []
    if target == 0:
        return result

    missing = target
    last_rank = -1
    n_fronts = 0

    for front in front_producer(solutions, multi_objective):
        if front.rank <= last_rank:
            raise RuntimeError(f"front producer yielded rank {front.rank} after rank {last_rank}")
        last_rank = front.rank
        n_fronts += 1

        assigned, _ = assign_crowding_distance(front, multi_objective)

        if len(assigned) > missing:
            assigned = _sort_by_crowding_distance(assigned)
            logger.debug(
                "truncating front %d: keeping %d of %d solutions by crowding distance",
                front.rank,
                missing,
                len(assigned),
            )

        take = min(len(assigned), missing)
        result.extend(assigned[:take])

        missing -= take
        if missing == 0:
            break

    if len(result) != target:
        raise RuntimeError(
            f"front producer covered only {len(result)} of {target} requested solutions "
            f"from a population of {len(solutions)}"
        )

    logger.debug("selected %d of %d solutions from %d fronts", target, len(solutions), n_fronts)
    return result


def nsga_selector(front_producer: FrontProducer = non_dominated_fronts):
    """Create an NSGA-II select-and-rank callable.

    Args:
        front_producer: Non-dominated sorting strategy used by the selector.
            Defaults to non_dominated_fronts.

    Returns:
        A SelectAndRank callable.

    Example:
        ```python
        selector = nsga_selector()
        selected = selector(population, n=100, multi_objective=mo)
        indices = selected_indices(selected)
        ```
    """

    def selector(
        solutions: Sequence[Any],
        n: int,
        multi_objective: MultiObjective | Sequence[Objective],
    ) -> list[AssignedCrowdingDistance]:
        """Select n solutions with NSGA-II truncation selection.

        Args:
            solutions: The current population.
            n: Number of solutions to select (clamped to the population size).
            multi_objective: Objectives used for sorting and crowding distance.

        Returns:
            List of selected AssignedCrowdingDistance records.
        """
        return select_and_rank(solutions, n, multi_objective, front_producer=front_producer)

    return selector


def selected_indices(selected: Sequence[AssignedCrowdingDistance]) -> np.ndarray:
    """Original population indices of a selection, in selection order.

    Returns:
        Integer array of shape (len(selected),).
    """
    return np.array([a.index for a in selected], dtype=np.intp)


def selection_state(selected: Sequence[AssignedCrowdingDistance]) -> dict[str, np.ndarray]:
    """Rank and crowding distance arrays aligned with a selection.

    Returns:
        Dictionary with keys:
        - 'rank': Front ranks, int64 array of shape (len(selected),).
        - 'crowding_distance': Crowding distances, float64 array of shape
          (len(selected),). Boundary solutions hold inf.
    """
    return {
        "rank": np.array([a.rank for a in selected], dtype=np.int64),
        "crowding_distance": np.array([a.crowding_distance for a in selected], dtype=np.float64),
    }
