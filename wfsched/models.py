"""Core data structures for workflow scheduling.

This module defines:
    JobId         -- alias for a job identity (any hashable, ordered value).
    Job           -- immutable job with its execution duration.
    Dependency    -- weighted producer -> consumer edge.
    ScheduledJob  -- one placed job with machine and timing data.
    Schedule      -- full result of a scheduling run plus makespan.
    PlacementEvent -- trace record emitted for every placement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

JobId = Any  # usually str ("A", "B", ...), must be hashable and orderable
Number = float | int


@dataclass(frozen=True)
class Job:
    """Schedulable unit of work.

    Attributes:
        job_id: Unique identity inside a graph.
        duration: Non-negative execution time.
    """

    job_id: JobId
    duration: Number

    def __str__(self) -> str:
        return str(self.job_id)


@dataclass(frozen=True)
class Dependency:
    """Directed edge: ``consumer`` needs the output of ``producer``.

    Attributes:
        producer: Job id producing the data.
        consumer: Job id consuming the data.
        weight: Communication cost charged when data flows along the edge.
    """

    producer: JobId
    consumer: JobId
    weight: Number

    def __str__(self) -> str:
        return f"({self.consumer}, {self.weight})"


@dataclass(frozen=True)
class ScheduledJob:
    """Single placed job.

    Fields:
        job_id: Job identifier.
        machine: Machine index (0-based).
        start: Start time (end - duration).
        end: Completion time of the job.
        duration: Execution time of the job.
    """

    job_id: JobId
    machine: int
    start: Number
    end: Number
    duration: Number


@dataclass(frozen=True)
class Schedule:
    """Result of one scheduling run.

    Fields:
        machines_number: Number of machines requested (K).
        order: Topological order the jobs were visited in.
        rows: Placed jobs in placement order (empty for K <= 1).
        machine_finish_times: Final finish time per machine.
        makespan: Overall completion time of the workflow.
    """

    machines_number: int
    order: tuple[JobId, ...]
    rows: tuple[ScheduledJob, ...]
    machine_finish_times: tuple[Number, ...]
    makespan: Number

    @property
    def assignments(self) -> dict[JobId, int]:
        return {row.job_id: row.machine for row in self.rows}

    @property
    def completion_times(self) -> dict[JobId, Number]:
        return {row.job_id: row.end for row in self.rows}

    def machine_jobs(self) -> dict[int, list[JobId]]:
        """Job ids per machine, in placement order (every machine present)."""
        by_machine: dict[int, list[JobId]] = {
            m: [] for m in range(len(self.machine_finish_times))
        }
        for row in self.rows:
            by_machine.setdefault(row.machine, []).append(row.job_id)
        return by_machine


@dataclass(frozen=True)
class PlacementEvent:
    """Snapshot handed to a trace callback after a job has been placed."""

    job_id: JobId
    machine: int
    predecessors: tuple[JobId, ...]
    dependency_ready: Optional[Number]
    completion_time: Number
    machine_finish_times: tuple[Number, ...]
