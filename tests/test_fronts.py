"""Tests for Pareto fronts and the default front producer.

Comprehensive test suite covering:
- TestDominates: Pareto dominance checks over objectives
- TestDominanceMatrix: Pairwise dominance
- TestNonDominatedFronts: Deb's fast non-dominated sorting
- TestFront: Front records
"""

from types import GeneratorType

import numpy as np
import pytest

from nsga_select.fronts import (
    Front,
    FrontMember,
    FrontProducer,
    dominance_matrix,
    dominates,
    non_dominated_fronts,
)
from nsga_select.objectives import MultiObjective

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def simple_2d_objectives() -> list[tuple[float, float]]:
    """Simple 2D objectives with clear dominance hierarchy.

    Resulting fronts:
        Front 0: [1,1]
        Front 1: [2,2], [1,3], [3,1]
        Front 2: [3,3]
    """
    return [
        (1.0, 1.0),  # 0: dominates all (front 0)
        (2.0, 2.0),  # 1: front 1
        (3.0, 3.0),  # 2: front 2
        (1.0, 3.0),  # 3: front 1
        (3.0, 1.0),  # 4: front 1
    ]


class CyclicObjective:
    """Inconsistent order: 0 < 1, 1 < 2, 2 < 0."""

    def total_order(self, a, b) -> int:
        if a == b:
            return 0
        return -1 if b == (a + 1) % 3 else 1

    def distance(self, a, b) -> float:
        return float(a - b)


# =============================================================================
# TestDominates
# =============================================================================


class TestDominates:
    """Tests for the scalar dominates function."""

    def test_clear_dominance(self, mo2) -> None:
        """Solution with all better values dominates."""
        assert dominates((1.0, 1.0), (2.0, 2.0), mo2) is True
        assert dominates((2.0, 2.0), (1.0, 1.0), mo2) is False

    def test_identical_solutions_no_dominance(self, mo2) -> None:
        """Identical solutions do not dominate each other."""
        assert dominates((1.0, 2.0), (1.0, 2.0), mo2) is False

    def test_tradeoff_no_dominance(self, mo2) -> None:
        """Solutions with tradeoffs do not dominate each other."""
        assert dominates((1.0, 3.0), (3.0, 1.0), mo2) is False
        assert dominates((3.0, 1.0), (1.0, 3.0), mo2) is False

    def test_partial_tie_with_one_better(self, mo2) -> None:
        """One tie and one strictly better gives dominance."""
        assert dominates((1.0, 2.0), (1.0, 3.0), mo2) is True


# =============================================================================
# TestDominanceMatrix
# =============================================================================


class TestDominanceMatrix:
    """Tests for pairwise dominance."""

    def test_matches_scalar_dominates(self, simple_2d_objectives, mo2) -> None:
        """Every entry agrees with dominates()."""
        dom = dominance_matrix(simple_2d_objectives, mo2)
        n = len(simple_2d_objectives)
        assert dom.shape == (n, n)
        assert dom.dtype == np.bool_
        for i in range(n):
            for j in range(n):
                assert dom[i, j] == dominates(simple_2d_objectives[i], simple_2d_objectives[j], mo2)

    def test_diagonal_is_false(self, simple_2d_objectives, mo2) -> None:
        """No solution dominates itself."""
        dom = dominance_matrix(simple_2d_objectives, mo2)
        assert not np.any(np.diag(dom))

    def test_empty(self, mo2) -> None:
        """Empty population gives an empty matrix."""
        assert dominance_matrix([], mo2).shape == (0, 0)


# =============================================================================
# TestNonDominatedFronts
# =============================================================================


class TestNonDominatedFronts:
    """Tests for the default front producer."""

    def test_known_fronts(self, simple_2d_objectives, mo2) -> None:
        """Fronts match the known dominance hierarchy."""
        fronts = list(non_dominated_fronts(simple_2d_objectives, mo2))
        assert [f.rank for f in fronts] == [0, 1, 2]
        assert [f.indices.tolist() for f in fronts] == [[0], [1, 3, 4], [2]]

    def test_partitions_population(self, rng, mo2) -> None:
        """Every solution appears in exactly one front."""
        solutions = [tuple(row) for row in rng.uniform(0, 1, size=(30, 2))]
        fronts = list(non_dominated_fronts(solutions, mo2))
        indices = np.concatenate([f.indices for f in fronts])
        assert sorted(indices.tolist()) == list(range(30))

    def test_members_reference_solutions(self, simple_2d_objectives, mo2) -> None:
        """Members carry the solution found at their index."""
        for front in non_dominated_fronts(simple_2d_objectives, mo2):
            for member in front:
                assert member.solution is simple_2d_objectives[member.index]

    def test_no_front_dominates_earlier_front(self, rng, mo2) -> None:
        """No member of a later front dominates a member of an earlier one."""
        solutions = [tuple(row) for row in rng.uniform(0, 1, size=(25, 2))]
        fronts = list(non_dominated_fronts(solutions, mo2))
        for r, earlier in enumerate(fronts):
            for later in fronts[r + 1 :]:
                for a in later:
                    for b in earlier:
                        assert not dominates(a.solution, b.solution, mo2)

    def test_all_nondominated_is_single_front(self, line_solutions, mo2) -> None:
        """A Pareto front forms a single rank-0 front."""
        fronts = list(non_dominated_fronts(line_solutions, mo2))
        assert len(fronts) == 1
        assert len(fronts[0]) == 5

    def test_empty_population(self, mo2) -> None:
        """Empty population yields no fronts."""
        assert list(non_dominated_fronts([], mo2)) == []

    def test_is_lazy(self, simple_2d_objectives, mo2) -> None:
        """Fronts are produced one at a time."""
        gen = non_dominated_fronts(simple_2d_objectives, mo2)
        assert isinstance(gen, GeneratorType)
        assert next(gen).rank == 0

    def test_inconsistent_order_raises(self) -> None:
        """A cyclic order leaves no non-dominated solution."""
        mo = MultiObjective.of(CyclicObjective())
        with pytest.raises(RuntimeError, match="consistent order"):
            list(non_dominated_fronts([0, 1, 2], mo))

    def test_satisfies_protocol(self) -> None:
        """The default producer implements FrontProducer."""
        assert isinstance(non_dominated_fronts, FrontProducer)


# =============================================================================
# TestFront
# =============================================================================


class TestFront:
    """Tests for Front records."""

    def test_len_and_iter(self) -> None:
        """len() and iteration follow the members."""
        members = (FrontMember(3, "a"), FrontMember(7, "b"))
        front = Front(rank=1, members=members)
        assert len(front) == 2
        assert [m.index for m in front] == [3, 7]
        np.testing.assert_array_equal(front.indices, np.array([3, 7]))

    def test_negative_rank_raises(self) -> None:
        """Ranks start at 0."""
        with pytest.raises(ValueError, match="rank must be non-negative"):
            Front(rank=-1, members=())

    def test_members_list_is_frozen(self) -> None:
        """A members list is stored as a tuple."""
        front = Front(rank=0, members=[FrontMember(0, "a")])
        assert isinstance(front.members, tuple)
