"""Objective definitions for crowding distance and non-dominated sorting.

This module provides the objective abstraction consumed by the selection
machinery. Solutions are opaque: the package never inspects them directly,
all access goes through an Objective.

- Objective: protocol for ordering and measuring solutions on one objective
- KeyObjective: objective derived from a key function
- ColumnObjective: objective reading one column of an objective vector
- MultiObjective: ordered, non-empty collection of objectives
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Objective(Protocol):
    """Protocol for a single objective over an opaque solution type.

    An objective provides a total order between two solutions (ascending
    order means better, i.e. minimization) and a distance between their
    values on this objective's scale.

    Implementations must be consistent across repeated calls within one
    selection, and distance must never return NaN for solutions that appear
    together in a front.

    Example:
        ```python
        class Cost:
            def total_order(self, a, b) -> int:
                return (a.cost > b.cost) - (a.cost < b.cost)

            def distance(self, a, b) -> float:
                return a.cost - b.cost
        ```
    """

    def total_order(self, a: Any, b: Any) -> int:
        """Compare a and b on this objective.

        Returns:
            Negative if a is better than b, zero if they are equivalent,
            positive if a is worse than b.
        """
        ...

    def distance(self, a: Any, b: Any) -> float:
        """Signed or unsigned distance between a and b on this objective."""
        ...


class KeyObjective:
    """Objective defined by a key function returning a real number.

    Solutions are ordered by ascending key, and the distance between two
    solutions is the difference of their keys.

    Args:
        key: Callable mapping a solution to its objective value.
        name: Optional label used in reprs and error messages.

    Example:
        >>> cost = KeyObjective(lambda s: s["cost"], name="cost")
        >>> cost.total_order({"cost": 1.0}, {"cost": 2.0})
        -1
        >>> cost.distance({"cost": 1.0}, {"cost": 4.0})
        -3.0
    """

    def __init__(self, key: Callable[[Any], float], name: str | None = None) -> None:
        if not callable(key):
            raise TypeError(f"key must be callable, got {type(key).__name__}")
        self.key = key
        self.name = name

    def total_order(self, a: Any, b: Any) -> int:
        ka = self.key(a)
        kb = self.key(b)
        return int(ka > kb) - int(ka < kb)

    def distance(self, a: Any, b: Any) -> float:
        return float(self.key(a) - self.key(b))

    def __repr__(self) -> str:
        label = self.name if self.name is not None else getattr(self.key, "__name__", "key")
        return f"KeyObjective({label})"


class ColumnObjective(KeyObjective):
    """Objective reading one element of a solution's objective vector.

    Intended for solutions that are themselves objective vectors (tuples,
    lists or numpy arrays of shape (n_obj,)).

    Args:
        column: Position of the objective value in each solution.
        name: Optional label used in reprs and error messages.

    Example:
        >>> f2 = ColumnObjective(1)
        >>> f2.distance((0.0, 3.0), (0.0, 1.0))
        2.0
    """

    def __init__(self, column: int, name: str | None = None) -> None:
        if column < 0:
            raise ValueError(f"column must be non-negative, got {column}")
        super().__init__(lambda s: s[column], name=name if name is not None else f"f{column}")
        self.column = column


@dataclass(frozen=True)
class MultiObjective:
    """Ordered, non-empty collection of objectives.

    The objective order is fixed for the duration of one selection and
    determines the order of per-objective statistics.

    Attributes:
        objectives: Tuple of objects implementing the Objective protocol.

    Example:
        >>> mo = MultiObjective.from_columns(2)
        >>> len(mo)
        2
    """

    objectives: tuple[Objective, ...]

    def __post_init__(self) -> None:
        """Validate and freeze the objective list.

        Raises:
            ValueError: If no objectives are given.
            TypeError: If an entry does not implement the Objective protocol.
        """
        objectives = tuple(self.objectives)
        if len(objectives) == 0:
            raise ValueError("MultiObjective requires at least one objective")
        for i, objective in enumerate(objectives):
            if not isinstance(objective, Objective):
                raise TypeError(
                    f"objective {i} must implement total_order and distance, got {type(objective).__name__}"
                )
        object.__setattr__(self, "objectives", objectives)

    @classmethod
    def from_columns(cls, n_obj: int) -> "MultiObjective":
        """Build one ColumnObjective per column of an objective vector.

        Args:
            n_obj: Number of objectives (columns).

        Returns:
            MultiObjective over columns 0..n_obj-1.
        """
        return cls(tuple(ColumnObjective(m) for m in range(n_obj)))

    @classmethod
    def of(cls, *objectives: Objective) -> "MultiObjective":
        """Build a MultiObjective from positional objectives."""
        return cls(objectives)

    def __len__(self) -> int:
        return len(self.objectives)

    def __iter__(self) -> Iterator[Objective]:
        return iter(self.objectives)

    def __getitem__(self, idx: int) -> Objective:
        return self.objectives[idx]


def as_multi_objective(objectives: "MultiObjective | Sequence[Objective]") -> MultiObjective:
    """Coerce a sequence of objectives into a MultiObjective."""
    if isinstance(objectives, MultiObjective):
        return objectives
    return MultiObjective(tuple(objectives))
