"""Canvas extents derived from a finished graph model."""

from typing import Dict, Tuple

from ..config import MAIN_BRANCH_ID, LayoutConfig
from ..graph_model import CommitNode, GraphModel


def canvas_height(model: GraphModel, config: LayoutConfig) -> float:
    return len(model.nodes) * config.row_height + config.padding_top + config.padding_bottom


def branch_ranges(model: GraphModel, config: LayoutConfig) -> Dict[str, Tuple[float, float]]:
    """Vertical rail extent per branch.

    Main runs from the top padding to below the last node in output order.
    A tag lane spans its own commits only; lanes without commits are absent.
    """
    last_y = model.nodes[-1].y if model.nodes else 0
    ranges: Dict[str, Tuple[float, float]] = {
        MAIN_BRANCH_ID: (config.padding_top, last_y + config.padding_bottom)
    }
    for node in model.nodes:
        if not isinstance(node, CommitNode) or node.branch == MAIN_BRANCH_ID:
            continue
        low, high = ranges.get(node.branch, (float("inf"), float("-inf")))
        ranges[node.branch] = (min(low, node.y), max(high, node.y))
    return ranges
