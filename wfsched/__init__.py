"""Workflow list scheduling on identical machines.

Exports the graph model, the scheduler and the error taxonomy.
"""

from wfsched.errors import (  # noqa: F401
    CyclicGraphError,
    DuplicateJobError,
    UnknownJobError,
    WorkflowError,
)
from wfsched.graph import WorkflowGraph  # noqa: F401
from wfsched.models import Dependency, Job, PlacementEvent, Schedule, ScheduledJob  # noqa: F401
from wfsched.report import makespan  # noqa: F401
from wfsched.scheduler import list_schedule  # noqa: F401
from wfsched.topology import topological_order  # noqa: F401

__all__ = [
    "CyclicGraphError",
    "Dependency",
    "DuplicateJobError",
    "Job",
    "PlacementEvent",
    "Schedule",
    "ScheduledJob",
    "UnknownJobError",
    "WorkflowError",
    "WorkflowGraph",
    "list_schedule",
    "makespan",
    "topological_order",
]
