"""Pytest configuration to make the project root importable.

This ensures that ``import simulator`` and the other top-level packages work
when tests are run from the repository root or other locations.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from simulator.examples import flip_first  # noqa: E402


@pytest.fixture
def flip_definition():
    """Alphabet {0, 1}, states q0 / halt / reject, the table from the worked examples."""
    return flip_first()
