# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "propagator" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzles import EASY, EASY_SOLUTION, ESCARGOT


def to_values(s):
    return [int(ch) or None for ch in s]


@pytest.fixture
def easy_values():
    return to_values(EASY)


@pytest.fixture
def solution_values():
    return to_values(EASY_SOLUTION)


@pytest.fixture
def escargot_values():
    return to_values(ESCARGOT)


@pytest.fixture
def puzzles_dir():
    return ROOT / "puzzles"
