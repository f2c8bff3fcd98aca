"""Face tracer.

Decomposes the directed edge graph of a wall set into closed walks. At each
junction the walk continues along the unused edge with the largest
counter-clockwise sweep from the edge it arrived on, i.e. it always takes
the sharpest turn in the same rotational sense. Each walk therefore follows
the boundary of a single face, keeping that face on its left.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

import networkx as nx

from ..core.errors import MalformedGraph
from ..core.model import DirectedEdge, EntityId, House, id_key
from ..core.topology import outgoing_edges, prune_used_edges
from ..geom.angles import increased_sin

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Closed:
    """The walk came back to its first edge."""

    edges: Tuple[DirectedEdge, ...]


@dataclass(frozen=True)
class Stuck:
    """The walk reached a node with no unused edge left."""

    edges: Tuple[DirectedEdge, ...]


@dataclass(frozen=True)
class Malformed:
    """The walk went round two loops that share only its start node."""

    node_id: EntityId
    edge: DirectedEdge
    edges: Tuple[DirectedEdge, ...]


WalkOutcome = Union[Closed, Stuck, Malformed]


def _next_start(graph: nx.MultiDiGraph) -> Optional[EntityId]:
    """Smallest node id that still has an outgoing edge."""
    candidates = [node for node, degree in graph.out_degree() if degree > 0]
    if not candidates:
        return None
    return min(candidates, key=id_key)


def mark_repeated(edges: Tuple[DirectedEdge, ...]) -> Tuple[DirectedEdge, ...]:
    """Flag every edge whose wall is walked more than once."""
    counts = Counter(edge.wall_id for edge in edges)
    return tuple(
        replace(edge, repeated=True) if counts[edge.wall_id] > 1 else edge
        for edge in edges
    )


def second_loop(edges: Tuple[DirectedEdge, ...], start: EntityId) -> Optional[DirectedEdge]:
    """First edge of a second enclosing loop through ``start``, if the walk has one.

    The walk is cut every time it leaves ``start``. Pieces made only of
    repeated walls are spurs walked out and back; any other piece after
    the first one is a separate loop sharing the start node.
    """
    pieces: List[List[DirectedEdge]] = []
    for edge in mark_repeated(edges):
        if edge.source == start or not pieces:
            pieces.append([])
        pieces[-1].append(edge)

    loops = [piece for piece in pieces if not all(edge.repeated for edge in piece)]
    if len(loops) < 2:
        return None
    return loops[1][0]


def trace_walk(house: House, graph: nx.MultiDiGraph, start: EntityId) -> WalkOutcome:
    """Walk from ``start`` until the walk closes, gets stuck or goes wrong.

    The walk may pass through ``start`` again on its way, e.g. around a
    spur hanging off it; it closes only when the first edge comes up
    again. Edges taken are flagged ``used`` in ``graph``; nothing is
    removed here.

    Args:
        house: House providing node coordinates.
        graph: Edge graph built by ``build_edge_graph``.
        start: Node to start from; must have an unused outgoing edge.

    Returns:
        A ``Closed``, ``Stuck`` or ``Malformed`` outcome.
    """
    first_edge = None
    for edge, data in outgoing_edges(graph, start):
        if not data["used"]:
            first_edge = edge
            data["used"] = True
            break
    if first_edge is None:
        raise ValueError(f"Node {start!r} has no unused outgoing edge")

    walk: List[DirectedEdge] = [first_edge]
    last, current = start, first_edge.target

    while True:
        pivot = house.nodes[current]
        back = house.nodes[last]

        best = None
        best_data = None
        best_score = None
        for edge, data in outgoing_edges(graph, current):
            if data["used"] and not (current == start and edge == first_edge):
                continue
            score = increased_sin(pivot, back, house.nodes[edge.target])
            if best is None or score > best_score:
                best, best_data, best_score = edge, data, score

        if best is None or best == first_edge:
            edges = tuple(walk)
            second = second_loop(edges, start)
            if second is not None:
                return Malformed(start, second, edges)
            if best is None:
                return Stuck(edges)
            return Closed(edges)

        best_data["used"] = True
        walk.append(best)
        last, current = current, best.target


def trace_walks(house: House, graph: nx.MultiDiGraph) -> List[Tuple[DirectedEdge, ...]]:
    """Consume ``graph`` into closed walks.

    Stuck walks are dropped. Repeated walls are flagged on the returned
    edges. ``graph`` is emptied in the process.

    Raises:
        MalformedGraph: If a walk goes round two enclosing loops that
            share only its start node.
    """
    walks = []
    stuck = 0

    start = _next_start(graph)
    while start is not None:
        outcome = trace_walk(house, graph, start)

        if isinstance(outcome, Malformed):
            raise MalformedGraph(outcome.node_id, outcome.edge)
        if isinstance(outcome, Closed):
            walks.append(mark_repeated(outcome.edges))
            LOGGER.debug(
                "Closed walk from node %r over %d edges", start, len(outcome.edges)
            )
        else:
            stuck += 1
            LOGGER.debug(
                "Dropped open walk from node %r after %d edges",
                start,
                len(outcome.edges),
            )

        prune_used_edges(graph)
        start = _next_start(graph)

    LOGGER.debug("Traced %d closed walks, dropped %d open walks", len(walks), stuck)
    return walks
