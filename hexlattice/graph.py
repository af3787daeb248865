"""networkx export of lattice topology."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from .cell import Cell, CellLike, to_cell
from .neighbors import DIRECTIONS
from .traversal import area, distance

if TYPE_CHECKING:  # pragma: no cover - typing only
    LatticeGraph: TypeAlias = nx.Graph[Cell]
else:  # pragma: no cover - runtime alias without subscripting
    LatticeGraph: TypeAlias = nx.Graph


def area_graph(cell: CellLike, radius: int) -> LatticeGraph:
    """Return the adjacency graph of the cells within ``radius`` of ``cell``.

    Nodes carry their ``distance`` from the center. Each edge stores the
    ``direction`` name leading from the node that is visited first.
    """

    center = to_cell(cell)
    graph: LatticeGraph = nx.Graph()
    cells = area(center, radius)
    for c in cells:
        graph.add_node(c, distance=distance(center, c))

    for c in cells:
        for direction in DIRECTIONS:
            neighbor = c.translate(direction.dx, direction.dy, direction.dz)
            if neighbor in graph and not graph.has_edge(c, neighbor):
                graph.add_edge(c, neighbor, direction=direction.name)
    return graph
