import pytest

from graph_valves import (
    DanglingEdgeError,
    DuplicateNodeError,
    GraphBuildError,
    MalformedRecordError,
    Tunnels,
    UnknownNodeError,
    ValveRecord,
)


def test_neighbors_round_trip_in_declaration_order():
    records = [
        ValveRecord("AA", 0, ("DD", "II", "BB")),
        ValveRecord("BB", 13, ("CC", "AA")),
        ValveRecord("CC", 2, ("DD", "BB")),
        ValveRecord("DD", 20, ("CC", "AA")),
        ValveRecord("II", 0, ("AA",)),
    ]
    graph = Tunnels.build(records)
    assert graph.ids == ("AA", "BB", "CC", "DD", "II")
    for record in records:
        assert graph.neighbors(record.id) == record.neighbors
        assert graph.node(record.id).flow_rate == record.flow_rate


def test_edges_are_directed():
    graph = Tunnels.build([ValveRecord("AA", 0, ("BB",)), ValveRecord("BB", 3)])
    assert graph.neighbors("AA") == ("BB",)
    assert graph.neighbors("BB") == ()


def test_duplicate_valve_is_rejected():
    with pytest.raises(DuplicateNodeError) as excinfo:
        Tunnels.build([ValveRecord("AA", 0, line=1), ValveRecord("AA", 4, line=2)])
    assert excinfo.value.node_id == "AA"
    assert excinfo.value.line == 2
    assert "line 2" in str(excinfo.value)


def test_dangling_tunnel_is_rejected():
    with pytest.raises(DanglingEdgeError) as excinfo:
        Tunnels.build([ValveRecord("AA", 0, ("ZZ",), line=7)])
    assert excinfo.value.node_id == "AA"
    assert excinfo.value.target == "ZZ"
    assert "ZZ" in str(excinfo.value)


@pytest.mark.parametrize("rate", [-1, 2.5, "3"])
def test_bad_flow_rate_is_malformed(rate):
    with pytest.raises(MalformedRecordError):
        Tunnels.build([ValveRecord("AA", rate)])


def test_empty_id_is_malformed():
    with pytest.raises(MalformedRecordError):
        Tunnels.build([ValveRecord("", 0)])


def test_build_errors_are_value_errors():
    assert issubclass(DuplicateNodeError, GraphBuildError)
    assert issubclass(GraphBuildError, ValueError)


def test_unknown_lookup_is_not_a_build_error(two_rooms):
    with pytest.raises(UnknownNodeError):
        two_rooms.node("ZZ")
    with pytest.raises(UnknownNodeError):
        two_rooms.neighbors("ZZ")
    assert not issubclass(UnknownNodeError, GraphBuildError)


def test_container_helpers(two_rooms):
    assert "AA" in two_rooms
    assert "ZZ" not in two_rooms
    assert len(two_rooms) == 2
    assert [valve.id for valve in two_rooms] == ["AA", "BB"]
    assert two_rooms.flow_rate("BB") == 5
