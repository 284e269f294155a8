"""Makespan reduction and plain-text reporting of a computed schedule."""

from __future__ import annotations

from typing import Sequence

from .graph import WorkflowGraph
from .models import Number, Schedule, ScheduledJob


def makespan(finish_times: Sequence[Number]) -> Number:
    """Latest machine finish time, 0 when there are no machines."""
    return max(finish_times, default=0)


def format_report(graph: WorkflowGraph, schedule: Schedule) -> list[str]:
    """Render a schedule as report lines.

    Lists the execution order, the jobs placed on each machine, the
    completion time of every job (only when jobs were actually placed, i.e.
    K >= 2) and the makespan.
    """
    lines: list[str] = []
    if schedule.order:
        lines.append(
            "Topological sort (job execution order): "
            + "[" + ", ".join(str(j) for j in schedule.order) + "]"
        )
    if schedule.rows:
        for machine, job_ids in schedule.machine_jobs().items():
            lines.append(
                f"Machine {machine + 1} scheduled jobs: ["
                + ", ".join(str(j) for j in job_ids) + "]"
            )
        lines.append("Job completion times:")
        completion = schedule.completion_times
        for job in graph:
            lines.append(f"  {job.job_id}: {completion.get(job.job_id, '-')}")
    lines.append(f"Minimum execution time of entire workflow: {schedule.makespan}")
    return lines


def check_no_machine_overlap(schedule: Schedule) -> bool:
    """Ensure no two jobs overlap on the same machine.

    Iterates rows grouped by machine, ordered by start, verifying that each
    starts no earlier than the previous one ended.

    Returns:
        True if no overlaps are found.

    Raises:
        AssertionError: On the first detected overlap.
    """
    by_machine: dict[int, list[ScheduledJob]] = {}
    for row in schedule.rows:
        by_machine.setdefault(row.machine, []).append(row)
    for machine_rows in by_machine.values():
        machine_rows.sort(key=lambda r: r.start)
        prev_end = None
        for r in machine_rows:
            if prev_end is not None and r.start < prev_end:
                raise AssertionError(
                    f"Overlap on machine {r.machine} between end {prev_end} and start {r.start}"
                )
            prev_end = r.end
    return True
