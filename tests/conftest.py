"""Pytest configuration and shared workflow fixtures.

Also ensures the project root is on sys.path so 'import wfsched' and
'import main' work without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from wfsched.graph import WorkflowGraph  # noqa: E402


@pytest.fixture
def chain_graph() -> WorkflowGraph:
    """A -> B -> C with durations 5, 3, 8 and edge weights 2, 1."""
    return WorkflowGraph.from_spec(
        {"A": 5, "B": 3, "C": 8},
        [("A", "B", 2), ("B", "C", 1)],
    )


@pytest.fixture
def cyclic_graph() -> WorkflowGraph:
    """Source S feeding a two-job cycle X <-> Y."""
    return WorkflowGraph.from_spec(
        {"S": 1, "X": 2, "Y": 3},
        [("S", "X", 1), ("X", "Y", 1), ("Y", "X", 1)],
    )
