import networkx as nx
import pytest

from hexlattice import Cell, distance
from hexlattice.graph import area_graph


@pytest.mark.parametrize("radius", [0, 1, 2, 3])
def test_area_graph_sizes(radius: int) -> None:
    graph = area_graph(Cell(1, -1, 0), radius)
    assert graph.number_of_nodes() == 3 * radius * radius + 3 * radius + 1
    assert graph.number_of_edges() == 9 * radius * radius + 3 * radius


def test_area_graph_attributes():
    center = Cell(0, 0, 0)
    graph = area_graph(center, 2)
    assert graph.nodes[center]["distance"] == 0
    assert graph.nodes[Cell(0, 2, -2)]["distance"] == 2
    assert graph.edges[Cell(0, 0, 0), Cell(0, 1, -1)]["direction"] in {"N", "S"}


def test_area_graph_hop_count_matches_distance():
    center = Cell(-2, 3, -1)
    graph = area_graph(center, 3)
    lengths = nx.single_source_shortest_path_length(graph, center)
    for cell, hops in lengths.items():
        assert hops == distance(center, cell)
