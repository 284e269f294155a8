"""Built-in example workflows.

Each factory returns a fresh ``WorkflowGraph`` so that callers never share
one instance between runs.
"""

from __future__ import annotations

from typing import Callable

from .graph import WorkflowGraph


def example_1() -> WorkflowGraph:
    """Three sources merging into D, fanning out to E/F and joining at G."""
    return WorkflowGraph.from_spec(
        {"A": 5, "B": 3, "C": 8, "D": 4, "E": 2, "F": 1, "G": 7, "H": 3},
        [
            ("A", "D", 2),
            ("B", "D", 1),
            ("C", "D", 5),
            ("D", "E", 3),
            ("D", "F", 4),
            ("E", "G", 1),
            ("F", "G", 2),
            ("G", "H", 2),
        ],
    )


def example_2() -> WorkflowGraph:
    """Ten jobs with two interleaved branches."""
    return WorkflowGraph.from_spec(
        {"A": 2, "B": 3, "C": 4, "D": 9, "E": 7, "F": 3, "G": 2, "H": 3, "I": 5, "J": 7},
        [
            ("A", "D", 3),
            ("B", "D", 2),
            ("B", "E", 3),
            ("C", "E", 2),
            ("D", "F", 1),
            ("E", "G", 5),
            ("E", "H", 2),
            ("F", "I", 3),
            ("G", "J", 3),
            ("H", "I", 3),
            ("H", "J", 3),
        ],
    )


def example_3() -> WorkflowGraph:
    """Thirteen unit-like jobs (duration 3) with uniform edge weight 2."""
    jobs = {job_id: 3 for job_id in "ABCDEFGHIJKLM"}
    return WorkflowGraph.from_spec(
        jobs,
        [
            ("C", "A", 2),
            ("C", "B", 2),
            ("D", "B", 2),
            ("D", "G", 2),
            ("D", "H", 2),
            ("E", "A", 2),
            ("E", "D", 2),
            ("E", "F", 2),
            ("F", "K", 2),
            ("F", "J", 2),
            ("G", "I", 2),
            ("H", "I", 2),
            ("J", "I", 2),
            ("J", "L", 2),
            ("J", "M", 2),
            ("K", "J", 2),
        ],
    )


EXAMPLES: dict[str, Callable[[], WorkflowGraph]] = {
    "example_1": example_1,
    "example_2": example_2,
    "example_3": example_3,
}


def load_example(name: str) -> WorkflowGraph:
    """Build the named example workflow.

    Raises:
        ValueError: If ``name`` is not a known example.
    """
    try:
        factory = EXAMPLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown example: {name} (available: {', '.join(sorted(EXAMPLES))})"
        ) from None
    return factory()
