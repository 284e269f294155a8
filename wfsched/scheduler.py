"""Greedy list scheduling of a workflow DAG on identical machines."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .graph import WorkflowGraph
from .models import Number, PlacementEvent, Schedule, ScheduledJob
from .report import makespan
from .topology import topological_order

logger = logging.getLogger("wfsched.scheduler")

TraceCallback = Callable[[PlacementEvent], None]


def earliest_machine(finish_times: Sequence[Number]) -> int:
    """Index of the machine that becomes free first (lowest index on ties)."""
    earliest = 0
    for i in range(1, len(finish_times)):
        if finish_times[i] < finish_times[earliest]:
            earliest = i
    return earliest


def list_schedule(
    graph: WorkflowGraph,
    machines_number: int,
    trace: Optional[TraceCallback] = None,
) -> Schedule:
    """Assign every job of ``graph`` to one of ``machines_number`` machines.

    Jobs are visited in topological order. Each one goes to the machine with
    the smallest finish time; it becomes ready once every predecessor has
    finished and its output has crossed the dependency edge. The edge weight
    is charged for every predecessor, also when both jobs share a machine.

    Special cases:
        ``machines_number <= 0``: nothing is scheduled, makespan 0.
        ``machines_number == 1``: makespan is the sum of all durations plus
        the sum of all edge weights; no per-job placement is done.

    Args:
        graph: Workflow to schedule. Not modified.
        machines_number: Number of identical machines (K).
        trace: Optional callback receiving a ``PlacementEvent`` after every
            placement (K >= 2 only).

    Returns:
        Schedule with rows, machine finish times and makespan.

    Raises:
        CyclicGraphError: If the graph has a cycle (checked before any job is
            placed, for K >= 1).
    """
    if machines_number <= 0:
        logger.info("No machines available (K=%d); nothing scheduled", machines_number)
        return Schedule(
            machines_number=machines_number,
            order=(),
            rows=(),
            machine_finish_times=(),
            makespan=0,
        )

    order = topological_order(graph, check_complete=True)

    if machines_number == 1:
        total = graph.total_duration() + graph.total_edge_weight()
        logger.info("Single machine: makespan %s (durations + edge weights)", total)
        return Schedule(
            machines_number=1,
            order=tuple(order),
            rows=(),
            machine_finish_times=(total,),
            makespan=total,
        )

    logger.debug("Topological sort (job execution order): %s", order)
    finish_times: list[Number] = [0] * machines_number
    completion: dict = {}
    rows: list[ScheduledJob] = []

    for job_id in order:
        job = graph.job(job_id)
        inputs = graph.predecessors_of(job_id)
        machine = earliest_machine(finish_times)
        logger.debug("Predecessors of %s: %s", job_id, [str(p) for p in inputs])

        if not inputs:
            finish_times[machine] += job.duration
            end = finish_times[machine]
            ready = None
        else:
            ready = 0
            for producer in inputs:
                edge = graph.edge_between(producer.job_id, job_id)
                weight = edge.weight if edge is not None else 0
                dependency_finish = max(completion[producer.job_id], finish_times[machine]) + weight
                logger.debug("Dependency %s finish time: %s", producer, dependency_finish)
                ready = max(ready, dependency_finish)
            finish_times[machine] = max(ready, finish_times[machine]) + job.duration
            end = ready + job.duration

        completion[job_id] = end
        rows.append(
            ScheduledJob(
                job_id=job_id,
                machine=machine,
                start=end - job.duration,
                end=end,
                duration=job.duration,
            )
        )
        logger.debug(
            "Placed %s on M%d, completes at %s; machines finish time: %s",
            job_id,
            machine + 1,
            end,
            finish_times,
        )
        if trace is not None:
            trace(
                PlacementEvent(
                    job_id=job_id,
                    machine=machine,
                    predecessors=tuple(p.job_id for p in inputs),
                    dependency_ready=ready,
                    completion_time=end,
                    machine_finish_times=tuple(finish_times),
                )
            )

    result = makespan(finish_times)
    logger.info("Scheduled %d jobs on %d machines, makespan %s", len(rows), machines_number, result)
    return Schedule(
        machines_number=machines_number,
        order=tuple(order),
        rows=tuple(rows),
        machine_finish_times=tuple(finish_times),
        makespan=result,
    )
