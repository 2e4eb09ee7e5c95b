"""Positioned graph model handed to the renderer."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Tuple, Union

COMMIT_TEST_ID = "git-commit-node"


@dataclass(frozen=True)
class Branch:
    id: str
    name: str
    color: str
    x: float

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "color": self.color, "x": self.x}


@dataclass(frozen=True)
class CommitNode:
    id: str
    branch: str
    slug: str
    title: str
    date: str
    x: float
    y: float
    summary: str | None = None
    type: Literal["commit"] = "commit"

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "branch": self.branch,
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "x": self.x,
            "y": self.y,
            "data-testid": COMMIT_TEST_ID,
            "data-slug": self.slug,
            "data-branch": self.branch,
        }
        if self.summary is not None:
            payload["summary"] = self.summary
        return payload


@dataclass(frozen=True)
class MergeNode:
    id: str
    slug: str
    date: str
    x: float
    y: float
    branch: Literal["main"] = "main"
    type: Literal["merge"] = "merge"

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "branch": self.branch,
            "slug": self.slug,
            "date": self.date,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class SeparatorNode:
    id: str
    label: str
    kind: Literal["year", "month"]
    y: float
    x: float = 0
    type: Literal["separator"] = "separator"

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "label": self.label,
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class TodayNode:
    id: str
    date: str
    y: float
    x: float = 0
    type: Literal["today"] = "today"

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "date": self.date, "x": self.x, "y": self.y}


GraphNode = Union[CommitNode, MergeNode, SeparatorNode, TodayNode]


@dataclass(frozen=True)
class GraphEdge:
    id: str
    source: str
    target: str
    type: Literal["merge-connector"] = "merge-connector"

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "from": self.source, "to": self.target, "type": self.type}


@dataclass(frozen=True)
class GraphModel:
    branches: Tuple[Branch, ...] = field(default_factory=tuple)
    nodes: Tuple[GraphNode, ...] = field(default_factory=tuple)
    edges: Tuple[GraphEdge, ...] = field(default_factory=tuple)

    def branch(self, branch_id: str) -> Branch | None:
        for branch in self.branches:
            if branch.id == branch_id:
                return branch
        return None

    def node(self, node_id: str) -> GraphNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def nodes_of_type(self, node_type: str) -> List[GraphNode]:
        return [node for node in self.nodes if node.type == node_type]

    def to_json(self) -> Dict[str, Any]:
        return {
            "branches": [branch.to_json() for branch in self.branches],
            "nodes": [node.to_json() for node in self.nodes],
            "edges": [edge.to_json() for edge in self.edges],
        }
