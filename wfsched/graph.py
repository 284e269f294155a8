"""Weighted workflow graph (jobs + dependency edges).

The graph is built once by the caller and only read afterwards; the
scheduler never writes into it. Job and edge insertion order is kept and
drives predecessor and successor iteration order.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional

from .errors import DuplicateJobError, UnknownJobError
from .models import Dependency, Job, JobId, Number


class WorkflowGraph:
    """Jobs (vertices) and weighted dependencies (edges) of a workflow."""

    def __init__(self) -> None:
        self._jobs: dict[JobId, Job] = {}
        self._outgoing: dict[JobId, list[Dependency]] = {}

    @classmethod
    def from_spec(
        cls,
        jobs: Mapping[JobId, Number],
        dependencies: Iterable[tuple[JobId, JobId, Number]] = (),
    ) -> "WorkflowGraph":
        """Build a graph from ``{id: duration}`` and ``(u, v, weight)`` triples."""
        graph = cls()
        for job_id, duration in jobs.items():
            graph.add_job(job_id, duration)
        for producer, consumer, weight in dependencies:
            graph.add_dependency(producer, consumer, weight)
        return graph

    def add_job(self, job_id: JobId, duration: Number) -> Job:
        """Register a new job.

        Args:
            job_id: Unique job identity.
            duration: Non-negative execution time.

        Returns:
            The created ``Job``.

        Raises:
            DuplicateJobError: If ``job_id`` is already registered.
            ValueError: If ``duration`` is negative.
        """
        if job_id in self._jobs:
            raise DuplicateJobError(job_id)
        if duration < 0:
            raise ValueError(f"Negative duration for job {job_id!r}: {duration}")
        job = Job(job_id=job_id, duration=duration)
        self._jobs[job_id] = job
        self._outgoing[job_id] = []
        return job

    def add_dependency(self, producer: JobId, consumer: JobId, weight: Number) -> Dependency:
        """Append a directed edge ``producer -> consumer``.

        Duplicate edges are kept as separate entries; ``edge_between`` returns
        the first one.

        Raises:
            UnknownJobError: If either endpoint is not registered.
            ValueError: If ``weight`` is negative.
        """
        for job_id in (producer, consumer):
            if job_id not in self._jobs:
                raise UnknownJobError(job_id)
        if weight < 0:
            raise ValueError(f"Negative weight for edge {producer!r}->{consumer!r}: {weight}")
        edge = Dependency(producer=producer, consumer=consumer, weight=weight)
        self._outgoing[producer].append(edge)
        return edge

    def job(self, job_id: JobId) -> Job:
        try:
            return self._jobs[job_id]
        except KeyError:
            raise UnknownJobError(job_id) from None

    @property
    def jobs(self) -> tuple[Job, ...]:
        return tuple(self._jobs.values())

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        return tuple(edge for edges in self._outgoing.values() for edge in edges)

    def outgoing(self, job_id: JobId) -> tuple[Dependency, ...]:
        if job_id not in self._outgoing:
            raise UnknownJobError(job_id)
        return tuple(self._outgoing[job_id])

    def predecessors_of(self, job_id: JobId) -> list[Job]:
        """Return every job with an edge into ``job_id``.

        Full scan over all edges (O(V+E)); producers appear once each, in
        graph insertion order.
        """
        if job_id not in self._jobs:
            raise UnknownJobError(job_id)
        predecessors: list[Job] = []
        for producer, edges in self._outgoing.items():
            if any(edge.consumer == job_id for edge in edges):
                predecessors.append(self._jobs[producer])
        return predecessors

    def edge_between(self, producer: JobId, consumer: JobId) -> Optional[Dependency]:
        """First edge ``producer -> consumer`` or ``None`` when there is none."""
        for edge in self._outgoing.get(producer, ()):
            if edge.consumer == consumer:
                return edge
        return None

    def total_duration(self) -> Number:
        return sum(job.duration for job in self._jobs.values())

    def total_edge_weight(self) -> Number:
        return sum(edge.weight for edge in self.dependencies)

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._jobs

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs.values())

    def __repr__(self) -> str:
        return f"WorkflowGraph(jobs={len(self._jobs)}, dependencies={len(self.dependencies)})"
