"""
Shared pytest fixtures for the threshold test suite.

Provides reusable vector clocks, the canonical three-observer example,
and paths to the clock file fixtures.
"""

from pathlib import Path
from typing import List

import pytest

from threshold.core.vector_clock import VectorClock


@pytest.fixture
def three_clocks() -> List[VectorClock]:
    """The canonical example: three observers over three positional actors."""
    return [
        VectorClock.from_seqs([10, 5, 5]),
        VectorClock.from_seqs([8, 10, 6]),
        VectorClock.from_seqs([9, 8, 7]),
    ]


@pytest.fixture
def named_clocks() -> List[VectorClock]:
    """Four observers over actors A, B and C, some omitting actors."""
    return [
        VectorClock({"A": 3, "B": 1}),
        VectorClock({"A": 2, "C": 4}),
        VectorClock({"A": 3, "B": 2, "C": 1}),
        VectorClock({"B": 2}),
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def clocks_dir(fixtures_dir: Path) -> Path:
    """Path to the clock file fixtures directory."""
    return fixtures_dir / "clocks"


@pytest.fixture
def tmp_clock_file(tmp_path: Path) -> Path:
    """Path for a temporary clock CSV file."""
    return tmp_path / "clocks.csv"
