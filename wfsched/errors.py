"""Exceptions raised for structurally invalid workflow graphs."""

from __future__ import annotations

from typing import Any, Iterable


class WorkflowError(ValueError):
    """Base class for workflow graph errors."""


class DuplicateJobError(WorkflowError):
    def __init__(self, job_id: Any):
        super().__init__(f"Job already registered: {job_id!r}")
        self.job_id = job_id


class UnknownJobError(WorkflowError):
    def __init__(self, job_id: Any):
        super().__init__(f"Unknown job: {job_id!r}")
        self.job_id = job_id


class CyclicGraphError(WorkflowError):
    """Topological pass could not order every job (graph has a cycle)."""

    def __init__(self, unordered: Iterable[Any]):
        self.unordered = tuple(unordered)
        super().__init__(
            "Workflow graph contains a cycle; unordered jobs: "
            + ", ".join(str(j) for j in self.unordered)
        )
