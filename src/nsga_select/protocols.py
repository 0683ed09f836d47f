"""Protocol definitions for selection strategies.

The surrounding evolutionary loop consumes environmental selection through
the SelectAndRank protocol: given the combined population, a target size and
the objectives, return the selected solutions annotated with their front rank
and crowding distance.

Example usage:
    ```python
    def generational_replacement(
        select: SelectAndRank,
        population: list,
        offspring: list,
        multi_objective: MultiObjective,
    ):
        combined = population + offspring
        selected = select(combined, len(population), multi_objective)
        return [a.solution for a in selected]
    ```
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from nsga_select.crowding import AssignedCrowdingDistance
from nsga_select.objectives import MultiObjective


@runtime_checkable
class SelectAndRank(Protocol):
    """Protocol for select-and-rank strategies.

    Parameters:
        solutions: The population to select from.
        n: Number of solutions to select. Implementations clamp it to the
            population size.
        multi_objective: Objectives used to rank the population.

    Returns:
        List of exactly min(n, len(solutions)) AssignedCrowdingDistance
        records, each carrying the original index of the selected solution.
    """

    def __call__(
        self,
        solutions: Sequence[Any],
        n: int,
        multi_objective: MultiObjective,
    ) -> list[AssignedCrowdingDistance]:
        ...
