"""Topology of the wall graph.

This module expands a set of walls into the directed multigraph walked by
the face tracer, and offers a couple of undirected views used for
diagnostics.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator, List, Tuple

import networkx as nx

from .errors import InvalidHouse
from .model import DirectedEdge, EntityId, House, Wall

LOGGER = logging.getLogger(__name__)


def _get_wall(house: House, wall_id: EntityId) -> Wall:
    """Look up a wall and check that both of its endpoints exist."""
    try:
        wall = house.walls[wall_id]
    except KeyError:
        raise InvalidHouse(f"Wall {wall_id!r} is referenced but not defined") from None

    for node_id in (wall.start, wall.end):
        if node_id not in house.nodes:
            raise InvalidHouse(
                f"Wall {wall_id!r} references nonexistent node {node_id!r}"
            )
    return wall


def build_edge_graph(house: House, wall_ids: Iterable[EntityId]) -> nx.MultiDiGraph:
    """Build the directed edge graph for a set of walls.

    Every wall contributes two edges keyed by their ``DirectedEdge``: one
    from its start node to its end node and one back. An edge that is
    already present is skipped, which happens when a wall is listed twice or
    is shared by two rooms processed together.

    Args:
        house: House object containing nodes and walls.
        wall_ids: Walls to expand, in the order their edges should be met.

    Returns:
        MultiDiGraph whose edges carry a ``used`` flag set to False and an
        ``order`` stamp counting insertions.

    Raises:
        InvalidHouse: If a wall or one of its endpoints does not exist.
    """
    graph = nx.MultiDiGraph()

    for wall_id in wall_ids:
        wall = _get_wall(house, wall_id)
        for reversed_ in (False, True):
            edge = DirectedEdge.along(wall, reversed_)
            if graph.has_edge(edge.source, edge.target, key=edge):
                continue
            graph.add_edge(
                edge.source,
                edge.target,
                key=edge,
                used=False,
                order=graph.number_of_edges(),
            )

    LOGGER.debug(
        "Built edge graph with %d nodes and %d directed edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def outgoing_edges(graph: nx.MultiDiGraph, node_id: EntityId) -> Iterator[Tuple[DirectedEdge, dict]]:
    """Yield ``(edge, data)`` for the edges leaving ``node_id`` in insertion order.

    networkx groups a node's out-edges by neighbour, which splits up
    parallel walls; the ``order`` stamp restores the order they were added.
    """
    out_edges = graph.out_edges(node_id, keys=True, data=True)
    for _, _, edge, data in sorted(out_edges, key=lambda item: item[3]["order"]):
        yield edge, data


def prune_used_edges(graph: nx.MultiDiGraph) -> int:
    """Remove every edge flagged as used, then drop nodes left without edges.

    Returns:
        The number of edges removed.
    """
    used = [
        (u, v, edge)
        for u, v, edge, is_used in graph.edges(keys=True, data="used")
        if is_used
    ]
    graph.remove_edges_from(used)
    graph.remove_nodes_from(list(nx.isolates(graph)))
    return len(used)


def build_wall_graph(house: House, wall_ids: Iterable[EntityId]) -> nx.MultiGraph:
    """Build an undirected multigraph with one edge per distinct wall, keyed by wall id."""
    graph = nx.MultiGraph()
    for wall_id in wall_ids:
        wall = _get_wall(house, wall_id)
        if graph.has_edge(wall.start, wall.end, key=wall_id):
            continue
        graph.add_edge(wall.start, wall.end, key=wall_id)
    return graph


def dangling_walls(house: House, wall_ids: Iterable[EntityId]) -> List[EntityId]:
    """List the walls lying on open branches.

    Leaves are peeled off repeatedly; every wall removed that way cannot be
    part of any enclosed face.

    Args:
        house: House object containing nodes and walls.
        wall_ids: Walls to analyse.

    Returns:
        Wall IDs on open branches, in the order they were peeled off.
    """
    graph = build_wall_graph(house, wall_ids)
    dangling = []

    leaves = deque(node for node, degree in graph.degree() if degree == 1)
    while leaves:
        node = leaves.popleft()
        if node not in graph or graph.degree(node) != 1:
            continue
        (_, neighbor, wall_id), = graph.edges(node, keys=True)
        dangling.append(wall_id)
        graph.remove_node(node)
        if graph.degree(neighbor) == 1:
            leaves.append(neighbor)

    return dangling
