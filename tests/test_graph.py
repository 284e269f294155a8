import pytest

from wfsched.errors import DuplicateJobError, UnknownJobError, WorkflowError
from wfsched.graph import WorkflowGraph


def test_add_job_and_lookup():
    graph = WorkflowGraph()
    job = graph.add_job("A", 5)
    assert job.job_id == "A"
    assert job.duration == 5
    assert "A" in graph
    assert len(graph) == 1
    assert graph.job("A") is job


def test_duplicate_job_rejected():
    graph = WorkflowGraph()
    graph.add_job("A", 5)
    with pytest.raises(DuplicateJobError) as exc:
        graph.add_job("A", 7)
    assert exc.value.job_id == "A"
    # original job kept
    assert graph.job("A").duration == 5


@pytest.mark.parametrize("producer, consumer", [("A", "Z"), ("Z", "A")])
def test_dependency_with_unknown_job(producer, consumer):
    graph = WorkflowGraph()
    graph.add_job("A", 1)
    with pytest.raises(UnknownJobError) as exc:
        graph.add_dependency(producer, consumer, 1)
    assert exc.value.job_id == "Z"
    assert graph.dependencies == ()


def test_errors_share_base_class():
    assert issubclass(DuplicateJobError, WorkflowError)
    assert issubclass(UnknownJobError, ValueError)


def test_negative_values_rejected():
    graph = WorkflowGraph()
    with pytest.raises(ValueError):
        graph.add_job("A", -1)
    graph.add_job("A", 1)
    graph.add_job("B", 1)
    with pytest.raises(ValueError):
        graph.add_dependency("A", "B", -2)


def test_predecessors_of_scans_all_edges():
    graph = WorkflowGraph.from_spec(
        {"A": 1, "B": 1, "C": 1, "D": 1},
        [("A", "D", 2), ("C", "D", 5), ("B", "C", 1)],
    )
    assert [j.job_id for j in graph.predecessors_of("D")] == ["A", "C"]
    assert [j.job_id for j in graph.predecessors_of("C")] == ["B"]
    assert graph.predecessors_of("A") == []
    with pytest.raises(UnknownJobError):
        graph.predecessors_of("Q")


def test_edge_between_present_and_absent():
    graph = WorkflowGraph.from_spec({"A": 1, "B": 1}, [("A", "B", 4)])
    edge = graph.edge_between("A", "B")
    assert edge is not None
    assert edge.weight == 4
    assert graph.edge_between("B", "A") is None
    assert graph.edge_between("missing", "B") is None


def test_duplicate_edges_kept_first_wins():
    graph = WorkflowGraph.from_spec({"A": 1, "B": 1}, [("A", "B", 4), ("A", "B", 9)])
    assert len(graph.outgoing("A")) == 2
    assert graph.edge_between("A", "B").weight == 4
    # producer listed once even with two edges
    assert [j.job_id for j in graph.predecessors_of("B")] == ["A"]
    assert graph.total_edge_weight() == 13


def test_totals(chain_graph):
    assert chain_graph.total_duration() == 16
    assert chain_graph.total_edge_weight() == 3
    assert [j.job_id for j in chain_graph] == ["A", "B", "C"]
