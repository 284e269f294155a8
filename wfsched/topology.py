"""Topological ordering of workflow graphs (Kahn's algorithm).

Concepts
--------
Topological order
    A sequence holding every job exactly once in which each producer comes
    before all of its consumers. The list scheduler visits jobs in this
    order, so every predecessor already has a completion time when its
    consumer is placed.
"""

from __future__ import annotations

import logging
from collections import deque

from .errors import CyclicGraphError
from .graph import WorkflowGraph
from .models import JobId

logger = logging.getLogger("wfsched.topology")


def in_degrees(graph: WorkflowGraph) -> dict[JobId, int]:
    """Count incoming edges per job (duplicate edges count separately)."""
    degrees: dict[JobId, int] = {job.job_id: 0 for job in graph}
    for edge in graph.dependencies:
        degrees[edge.consumer] += 1
    return degrees


def topological_order(graph: WorkflowGraph, check_complete: bool = False) -> list[JobId]:
    """Order jobs so that every dependency points forward.

    Jobs without incoming edges seed a FIFO queue in ascending id order;
    each dequeued job releases its consumers (in edge insertion order) once
    their in-degree drops to zero.

    Args:
        graph: Workflow to order.
        check_complete: When True verify that every job was ordered and
            raise if not.

    Returns:
        List of job ids. Shorter than ``len(graph)`` if the graph has a
        cycle and ``check_complete`` is False.

    Raises:
        CyclicGraphError: If ``check_complete`` is True and a cycle left
            some jobs unordered.
    """
    degrees = in_degrees(graph)
    queue = deque(sorted(job_id for job_id, degree in degrees.items() if degree == 0))
    order: list[JobId] = []

    while queue:
        job_id = queue.popleft()
        order.append(job_id)
        for edge in graph.outgoing(job_id):
            degrees[edge.consumer] -= 1
            if degrees[edge.consumer] == 0:
                queue.append(edge.consumer)

    if check_complete and len(order) != len(graph):
        ordered = set(order)
        unordered = [job.job_id for job in graph if job.job_id not in ordered]
        raise CyclicGraphError(unordered)

    logger.debug("Topological order: %s", order)
    return order


def check_topological_order(graph: WorkflowGraph, order: list[JobId]) -> bool:
    """Ensure ``order`` holds every job once with producers first.

    Returns:
        True if the order is valid.

    Raises:
        AssertionError: On the first missing, repeated or misplaced job.
    """
    position: dict[JobId, int] = {}
    for index, job_id in enumerate(order):
        if job_id in position:
            raise AssertionError(f"Job {job_id} appears more than once")
        if job_id not in graph:
            raise AssertionError(f"Job {job_id} is not part of the graph")
        position[job_id] = index
    missing = [job.job_id for job in graph if job.job_id not in position]
    if missing:
        raise AssertionError(f"Jobs missing from order: {missing}")
    for edge in graph.dependencies:
        if position[edge.producer] >= position[edge.consumer]:
            raise AssertionError(
                f"Dependency {edge.producer}->{edge.consumer} violated by order"
            )
    return True
