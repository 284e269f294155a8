import pytest

from wfsched.examples import example_1
from wfsched.models import Schedule, ScheduledJob
from wfsched.report import check_no_machine_overlap, format_report, makespan
from wfsched.scheduler import list_schedule


@pytest.mark.parametrize("values, expected", [([], 0), ([3], 3), ([4, 9, 2], 9), ((1.5, 0.5), 1.5)])
def test_makespan_reduction(values, expected):
    assert makespan(values) == expected


def test_report_for_two_machines():
    graph = example_1()
    lines = format_report(graph, list_schedule(graph, 2))
    assert lines[0] == "Topological sort (job execution order): [A, B, C, D, E, F, G, H]"
    assert "Machine 1 scheduled jobs: [A, D, F, G]" in lines
    assert "Machine 2 scheduled jobs: [B, C, E, H]" in lines
    assert "  H: 39" in lines
    assert lines[-1] == "Minimum execution time of entire workflow: 39"


def test_report_single_machine_has_no_completion_table():
    graph = example_1()
    lines = format_report(graph, list_schedule(graph, 1))
    assert "Job completion times:" not in lines
    assert lines[-1] == "Minimum execution time of entire workflow: 53"


def test_report_without_machines():
    graph = example_1()
    assert format_report(graph, list_schedule(graph, 0)) == [
        "Minimum execution time of entire workflow: 0"
    ]


def test_overlap_detected():
    rows = (
        ScheduledJob(job_id="A", machine=0, start=0, end=5, duration=5),
        ScheduledJob(job_id="B", machine=0, start=4, end=6, duration=2),
    )
    sched = Schedule(
        machines_number=1, order=("A", "B"), rows=rows, machine_finish_times=(6,), makespan=6
    )
    with pytest.raises(AssertionError):
        check_no_machine_overlap(sched)
