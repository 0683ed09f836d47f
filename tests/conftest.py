"""Shared test fixtures for nsga-select tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- mo2: Two column objectives for tuple / array solutions
- line_front: Five solutions on an anti-correlated line, as one front
- two_front_population: Three rank-0 solutions followed by a rank-1 front of five
- front_producer_double: Front producer that records its calls
"""

import numpy as np
import pytest

from nsga_select import Front, FrontMember, MultiObjective


def _make_front(rank: int, solutions, start: int = 0) -> Front:
    """Build a front whose members are indexed from `start`."""
    return Front(rank=rank, members=tuple(FrontMember(start + i, s) for i, s in enumerate(solutions)))


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mo2() -> MultiObjective:
    """Bi-objective minimization over columns 0 and 1."""
    return MultiObjective.from_columns(2)


@pytest.fixture
def line_solutions() -> list[tuple[float, float]]:
    """Perfect anti-correlated line: f1 = [1..5], f2 = [5..1]."""
    return [(1.0, 5.0), (2.0, 4.0), (3.0, 3.0), (4.0, 2.0), (5.0, 1.0)]


@pytest.fixture
def line_front(line_solutions) -> Front:
    """The anti-correlated line as a rank-0 front."""
    return _make_front(0, line_solutions)


@pytest.fixture
def two_front_population() -> list[tuple[float, float]]:
    """Population with a rank-0 front of 3 and a rank-1 front of 5.

    Front 0 (indices 0-2): (0, 8), (4, 4), (8, 0)
    Front 1 (indices 3-7): (0, 10), (1, 9), (5, 5), (8, 2), (10, 0)

    Crowding distances in front 1: (0, 10) and (10, 0) are boundaries,
    (5, 5) has 0.7, (1, 9) and (8, 2) have 0.5.
    """
    return [
        (0.0, 8.0),
        (4.0, 4.0),
        (8.0, 0.0),
        (0.0, 10.0),
        (1.0, 9.0),
        (5.0, 5.0),
        (8.0, 2.0),
        (10.0, 0.0),
    ]


@pytest.fixture
def front_producer_double():
    """Front producer that yields pre-built fronts and counts its calls.

    Returns a tuple of (factory, call_log). factory(fronts) returns a producer
    yielding the given fronts; each call appends (solutions, multi_objective)
    to call_log.
    """
    call_log: list[tuple] = []

    def factory(fronts):
        def producer(solutions, multi_objective):
            call_log.append((solutions, multi_objective))
            yield from fronts

        return producer

    return factory, call_log


@pytest.fixture
def make_front():
    """Builder for fronts: make_front(rank, solutions, start=0)."""
    return _make_front
