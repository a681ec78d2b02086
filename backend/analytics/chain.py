"""
Chain analysis — pure functions only.

Builds an undirected overlap graph over the current figure set and searches
it breadth-first for the shortest chain of contemporaries linking the two
target figures. The graph is rebuilt from scratch on every call.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Optional, Sequence

import networkx as nx

from analytics.contemporaries import are_contemporaries, is_connected_to_chain
from models import ChainAnalysis, HistoricalFigure

logger = logging.getLogger(__name__)

ChainEventHook = Callable[[str, dict[str, Any]], None]


def _unique_by_id(figures: Sequence[HistoricalFigure]) -> dict[str, HistoricalFigure]:
    # First occurrence wins for duplicate ids; dict keeps insertion order.
    by_id: dict[str, HistoricalFigure] = {}
    for f in figures:
        by_id.setdefault(f.id, f)
    return by_id


def build_overlap_graph(figures: Sequence[HistoricalFigure]) -> nx.Graph:
    """
    One node per distinct figure id, one edge per contemporary pair.

    Neighbour order follows the order figures were supplied in, which is
    what makes BFS tie-breaking reproducible for a given input.
    """
    by_id = _unique_by_id(figures)
    G = nx.Graph()
    G.add_nodes_from(by_id)

    ordered = list(by_id.values())
    for i, a in enumerate(ordered):
        for b in ordered[i + 1:]:
            if are_contemporaries(a, b):
                G.add_edge(a.id, b.id)
    return G


def _bfs_path(G: nx.Graph, start_id: str, end_id: str) -> Optional[list[str]]:
    if start_id == end_id:
        return [start_id]
    if start_id not in G or end_id not in G:
        return None

    parent: dict[str, Optional[str]] = {start_id: None}
    queue = deque([start_id])
    while queue:
        current = queue.popleft()
        if current == end_id:
            path = []
            node: Optional[str] = current
            while node is not None:
                path.append(node)
                node = parent[node]
            return path[::-1]
        for neighbour in G.neighbors(current):
            if neighbour not in parent:
                parent[neighbour] = current
                queue.append(neighbour)
    return None


def find_shortest_path(
    start: HistoricalFigure,
    end: HistoricalFigure,
    figures: Sequence[HistoricalFigure],
    graph: Optional[nx.Graph] = None,
) -> Optional[list[HistoricalFigure]]:
    """
    Shortest chain from start to end inclusive, or None if they are not linked.

    A target missing from `figures` is an isolated node.
    """
    G = graph if graph is not None else build_overlap_graph(figures)
    ids = _bfs_path(G, start.id, end.id)
    if ids is None:
        return None

    by_id = _unique_by_id(figures)
    by_id[start.id] = start
    by_id[end.id] = end
    return [by_id[h] for h in ids]


def analyze_chain(
    target_a: HistoricalFigure,
    target_b: HistoricalFigure,
    figures: Sequence[HistoricalFigure],
    on_event: Optional[ChainEventHook] = None,
) -> ChainAnalysis:
    """
    Connectivity and shortest chain between the two targets.

    figures  — the full current figure set, targets normally included
    on_event — optional hook called as on_event(name, payload) for
               'graph_built', then 'path_found' or 'path_not_found'
    Never raises on degenerate input. chain_length is clamped at 0, so a
    round where both targets are the same figure scores 0.
    """
    def emit(name: str, payload: dict[str, Any]) -> None:
        logger.debug("chain %s: %s", name, payload)
        if on_event is not None:
            on_event(name, payload)

    G = build_overlap_graph(figures)
    emit("graph_built", {"nodes": G.number_of_nodes(), "edges": G.number_of_edges()})

    all_ids = [f.id for f in figures]
    path = find_shortest_path(target_a, target_b, figures, graph=G)

    if path is None:
        emit("path_not_found", {"target_a": target_a.name, "target_b": target_b.name})
        connected = {target_a.id, target_b.id}
        return ChainAnalysis(
            target_a=target_a,
            target_b=target_b,
            connected_figures=connected,
            unconnected_figures={h for h in all_ids if h not in connected},
            is_complete=False,
            chain_length=0,
            shortest_path=[],
        )

    connected = {f.id for f in path}
    chain_length = max(0, len(path) - 2)
    emit("path_found", {"length": chain_length, "path": [f.name for f in path]})
    return ChainAnalysis(
        target_a=target_a,
        target_b=target_b,
        connected_figures=connected,
        unconnected_figures={h for h in all_ids if h not in connected},
        is_complete=True,
        chain_length=chain_length,
        shortest_path=path,
    )


def would_improve_chain(
    candidate: HistoricalFigure,
    target_a: HistoricalFigure,
    target_b: HistoricalFigure,
    current_figures: Sequence[HistoricalFigure],
) -> bool:
    """
    True if adding `candidate` completes the chain, shortens it, or (while
    still incomplete) at least touches one of the targets.
    """
    before = analyze_chain(target_a, target_b, current_figures)
    after  = analyze_chain(target_a, target_b, [*current_figures, candidate])

    if not before.is_complete and after.is_complete:
        return True
    if before.is_complete and after.is_complete:
        return after.chain_length < before.chain_length
    if not before.is_complete:
        return is_connected_to_chain(candidate, (target_a, target_b))
    return False
