"""Commit-graph layout for chronological, tagged posts."""

from .config import LayoutConfig
from .graph_model import (
    Branch,
    CommitNode,
    GraphEdge,
    GraphModel,
    GraphNode,
    MergeNode,
    SeparatorNode,
    TodayNode,
)
from .graph_orchestrator import GraphOrchestrator
from .layout import GraphLayoutWorkflow, map_posts_to_graph
from .pipeline import PipelinePhase, PipelineRunner
from .records import PostRecord

__all__ = [
    "LayoutConfig",
    "Branch",
    "CommitNode",
    "MergeNode",
    "SeparatorNode",
    "TodayNode",
    "GraphNode",
    "GraphEdge",
    "GraphModel",
    "GraphOrchestrator",
    "GraphLayoutWorkflow",
    "map_posts_to_graph",
    "PipelinePhase",
    "PipelineRunner",
    "PostRecord",
]
