import pytest

from wfsched.errors import CyclicGraphError
from wfsched.examples import EXAMPLES, example_1
from wfsched.graph import WorkflowGraph
from wfsched.topology import check_topological_order, in_degrees, topological_order


def test_example_1_order():
    assert topological_order(example_1()) == ["A", "B", "C", "D", "E", "F", "G", "H"]


@pytest.mark.parametrize("name", sorted(EXAMPLES))
def test_examples_produce_valid_orders(name):
    graph = EXAMPLES[name]()
    order = topological_order(graph, check_complete=True)
    assert check_topological_order(graph, order)


def test_sources_seeded_in_ascending_id_order():
    # inserted out of order; ties between sources broken by id
    graph = WorkflowGraph.from_spec({"C": 1, "A": 1, "B": 1, "D": 1}, [("C", "D", 1)])
    assert topological_order(graph) == ["A", "B", "C", "D"]


def test_ids_are_not_limited_to_letters():
    graph = WorkflowGraph.from_spec(
        {"load": 1, "transform": 2, "extract": 3},
        [("extract", "transform", 1), ("transform", "load", 1)],
    )
    assert topological_order(graph) == ["extract", "transform", "load"]


def test_in_degrees_count_duplicate_edges():
    graph = WorkflowGraph.from_spec({"A": 1, "B": 1}, [("A", "B", 1), ("A", "B", 2)])
    assert in_degrees(graph) == {"A": 0, "B": 2}
    assert topological_order(graph) == ["A", "B"]


def test_cycle_gives_partial_order(cyclic_graph):
    assert topological_order(cyclic_graph) == ["S"]


def test_cycle_raises_when_checked(cyclic_graph):
    with pytest.raises(CyclicGraphError) as exc:
        topological_order(cyclic_graph, check_complete=True)
    assert set(exc.value.unordered) == {"X", "Y"}


def test_self_loop_is_a_cycle():
    graph = WorkflowGraph.from_spec({"A": 1}, [("A", "A", 1)])
    with pytest.raises(CyclicGraphError):
        topological_order(graph, check_complete=True)


def test_empty_graph():
    assert topological_order(WorkflowGraph(), check_complete=True) == []


def test_check_topological_order_rejects_bad_orders(chain_graph):
    with pytest.raises(AssertionError):
        check_topological_order(chain_graph, ["B", "A", "C"])
    with pytest.raises(AssertionError):
        check_topological_order(chain_graph, ["A", "B"])
    with pytest.raises(AssertionError):
        check_topological_order(chain_graph, ["A", "A", "B", "C"])
