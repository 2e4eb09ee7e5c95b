"""Layout passes turning published posts into a positioned graph."""

from .branches import BranchRegistry, build_branch_registry, slugify_tag
from .commits import build_commit_nodes
from .geometry import branch_ranges, canvas_height
from .separators import build_separators
from .today import build_today_marker
from .workflow import GraphLayoutWorkflow, map_posts_to_graph

__all__ = [
    "BranchRegistry",
    "build_branch_registry",
    "slugify_tag",
    "build_commit_nodes",
    "build_separators",
    "build_today_marker",
    "branch_ranges",
    "canvas_height",
    "GraphLayoutWorkflow",
    "map_posts_to_graph",
]
