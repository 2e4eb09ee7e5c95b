"""Layout passes composed as a linear LangGraph workflow."""

import logging
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..config import LayoutConfig
from ..graph_model import GraphEdge, GraphModel, GraphNode, SeparatorNode, TodayNode
from ..graph_orchestrator import GraphOrchestrator
from ..records import PostRecord, coerce_records, published
from .branches import BranchRegistry, build_branch_registry
from .commits import build_commit_nodes
from .separators import build_separators
from .today import build_today_marker

logger = logging.getLogger(__name__)

Clock = Callable[[], date]
RecordInput = Union[Mapping[str, Any], PostRecord]


class LayoutState(TypedDict, total=False):
    records: List[PostRecord]
    today: date
    published: List[PostRecord]
    registry: BranchRegistry
    commit_nodes: List[GraphNode]
    edges: List[GraphEdge]
    separators: List[SeparatorNode]
    today_marker: TodayNode | None


class GraphLayoutWorkflow:
    """Runs branch, commit, separator and today passes in order.

    Each pass reads earlier results from the state and returns only its own
    new collections.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()
        self._graph = self._build_workflow()

    def run(self, records: Iterable[RecordInput], today: date) -> GraphModel:
        result_state = self._graph.invoke({"records": coerce_records(records), "today": today})
        return self._assemble(result_state)

    def _build_workflow(self):
        graph = StateGraph(LayoutState)
        graph.add_node("register_branches", self._register_branches)
        graph.add_node("build_commits", self._build_commits)
        graph.add_node("insert_separators", self._insert_separators)
        graph.add_node("place_today_marker", self._place_today_marker)
        graph.add_edge(START, "register_branches")
        graph.add_edge("register_branches", "build_commits")
        graph.add_edge("build_commits", "insert_separators")
        graph.add_edge("insert_separators", "place_today_marker")
        graph.add_edge("place_today_marker", END)
        return graph.compile()

    def _register_branches(self, state: LayoutState) -> Dict[str, Any]:
        surviving = published(state["records"])
        return {
            "published": surviving,
            "registry": build_branch_registry(surviving, self.config),
        }

    def _build_commits(self, state: LayoutState) -> Dict[str, Any]:
        nodes, edges = build_commit_nodes(state["published"], state["registry"], self.config)
        return {"commit_nodes": nodes, "edges": edges}

    def _insert_separators(self, state: LayoutState) -> Dict[str, Any]:
        return {"separators": build_separators(state["published"], self.config)}

    def _place_today_marker(self, state: LayoutState) -> Dict[str, Any]:
        return {"today_marker": build_today_marker(state["published"], state["today"], self.config)}

    @staticmethod
    def _assemble(state: Mapping[str, Any]) -> GraphModel:
        orchestrator = GraphOrchestrator()
        orchestrator.set_branches(state["registry"].branches)
        orchestrator.add_nodes(state.get("commit_nodes", []))
        orchestrator.add_nodes(state.get("separators", []))
        today_marker = state.get("today_marker")
        if today_marker is not None:
            orchestrator.add_node(today_marker)
        orchestrator.add_edges(state.get("edges", []))
        return orchestrator.build()


@lru_cache(maxsize=16)
def _workflow_for(config: LayoutConfig) -> GraphLayoutWorkflow:
    return GraphLayoutWorkflow(config)


def map_posts_to_graph(
    posts: Iterable[RecordInput],
    today: Union[date, Clock],
    config: LayoutConfig | None = None,
) -> GraphModel:
    """Lay out newest-first posts as a commit graph.

    `today` is either a date or a zero-argument clock returning one; the
    layout never reads the system clock itself.
    """
    current_day = today() if callable(today) else today
    if isinstance(current_day, datetime):
        current_day = current_day.date()
    if not isinstance(current_day, date):
        raise TypeError(f"today must be a date, got {type(current_day).__name__}")
    return _workflow_for(config or LayoutConfig()).run(posts, current_day)
