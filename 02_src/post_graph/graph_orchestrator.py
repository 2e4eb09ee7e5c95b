"""Deterministic assembly of layout pass outputs into a graph model."""

import logging
from typing import Any, Dict, Iterable, List

from .errors import DuplicateNodeError
from .graph_model import Branch, GraphEdge, GraphModel, GraphNode

logger = logging.getLogger(__name__)

TODAY_NODE_ID = "today-marker"


def commit_node_id(branch_id: str, slug: str) -> str:
    return f"commit-{branch_id}-{slug}"


def merge_node_id(slug: str) -> str:
    return f"merge-{slug}"


def year_separator_id(year: int) -> str:
    return f"separator-year-{year}"


def month_separator_id(year: int, month: int) -> str:
    return f"separator-month-{year}-{month:02d}"


def connector_edge_id(source_id: str, target_id: str) -> str:
    return f"edge-{source_id}-{target_id}"


class GraphOrchestrator:
    """Owns identifiers and ordered collection of graph parts."""

    def __init__(self) -> None:
        self._branches: List[Branch] = []
        self._nodes: Dict[str, GraphNode] = {}
        self._edges: Dict[str, GraphEdge] = {}

    def set_branches(self, branches: Iterable[Branch]) -> None:
        self._branches = list(branches)

    def add_node(self, node: GraphNode) -> str:
        if node.id in self._nodes:
            raise DuplicateNodeError(node.id)
        self._nodes[node.id] = node
        return node.id

    def add_nodes(self, nodes: Iterable[GraphNode]) -> None:
        for node in nodes:
            self.add_node(node)

    def add_edge(self, edge: GraphEdge) -> str:
        if edge.source not in self._nodes:
            raise ValueError(f"Unknown source node: {edge.source}")
        if edge.target not in self._nodes:
            raise ValueError(f"Unknown target node: {edge.target}")
        if edge.id in self._edges:
            raise ValueError(f"Duplicate edge id: {edge.id}")
        self._edges[edge.id] = edge
        return edge.id

    def add_edges(self, edges: Iterable[GraphEdge]) -> None:
        for edge in edges:
            self.add_edge(edge)

    def build(self) -> GraphModel:
        model = GraphModel(
            branches=tuple(self._branches),
            nodes=tuple(self._nodes.values()),
            edges=tuple(self._edges.values()),
        )
        logger.debug(
            "Assembled graph: branches=%d nodes=%d edges=%d",
            len(model.branches),
            len(model.nodes),
            len(model.edges),
        )
        return model

    def to_json(self) -> Dict[str, Any]:
        return self.build().to_json()
