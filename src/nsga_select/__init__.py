"""nsga-select: NSGA-II environmental selection.

Crowding distance assignment and truncation selection over Pareto fronts,
for any solution type. Solutions are opaque; ordering and distances come from
Objective implementations.

Example:
    >>> from nsga_select import MultiObjective, select_and_rank
    >>> mo = MultiObjective.from_columns(2)
    >>> population = [(1.0, 4.0), (2.0, 3.0), (3.0, 2.0), (4.0, 1.0), (5.0, 5.0)]
    >>> selected = select_and_rank(population, 3, mo)
    >>> [a.rank for a in selected]
    [0, 0, 0]
"""

from nsga_select.crowding import AssignedCrowdingDistance, ObjectiveStat, assign_crowding_distance
from nsga_select.fronts import (
    Front,
    FrontMember,
    FrontProducer,
    dominance_matrix,
    dominates,
    non_dominated_fronts,
)
from nsga_select.objectives import ColumnObjective, KeyObjective, MultiObjective, Objective
from nsga_select.protocols import SelectAndRank
from nsga_select.registry import SelectorRegistry, list_selectors
from nsga_select.selection import nsga_selector, select_and_rank, selected_indices, selection_state

# Register built-in selectors
SelectorRegistry.register("nsga", nsga_selector)

__all__ = [
    # Selection
    "select_and_rank",
    "nsga_selector",
    "selected_indices",
    "selection_state",
    # Crowding distance
    "assign_crowding_distance",
    "AssignedCrowdingDistance",
    "ObjectiveStat",
    # Fronts
    "Front",
    "FrontMember",
    "FrontProducer",
    "dominates",
    "dominance_matrix",
    "non_dominated_fronts",
    # Objectives
    "Objective",
    "KeyObjective",
    "ColumnObjective",
    "MultiObjective",
    # Protocols and registry
    "SelectAndRank",
    "SelectorRegistry",
    "list_selectors",
]
