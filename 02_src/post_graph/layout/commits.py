"""Commit nodes plus their merge counterparts on main."""

import logging
from typing import List, Sequence, Tuple

from ..config import MAIN_BRANCH_ID, LayoutConfig
from ..graph_model import CommitNode, GraphEdge, GraphNode, MergeNode
from ..graph_orchestrator import commit_node_id, connector_edge_id, merge_node_id
from ..records import PostRecord
from .branches import BranchRegistry

logger = logging.getLogger(__name__)


def build_commit_nodes(
    records: Sequence[PostRecord],
    registry: BranchRegistry,
    config: LayoutConfig,
) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """Emit exactly one commit per published record, newest first.

    A commit on a tag lane is followed by a merge dot on main at the same
    row and a connector edge between the two.
    """
    nodes: List[GraphNode] = []
    edges: List[GraphEdge] = []

    for index, record in enumerate(records):
        y = config.row_y(index)
        branch = registry.for_tag(record.primary_tag)

        if branch is None or branch.id == MAIN_BRANCH_ID:
            nodes.append(
                CommitNode(
                    id=commit_node_id(MAIN_BRANCH_ID, record.slug),
                    branch=MAIN_BRANCH_ID,
                    slug=record.slug,
                    title=record.title,
                    summary=record.summary,
                    date=record.date,
                    x=config.main_x,
                    y=y,
                )
            )
            continue

        commit = CommitNode(
            id=commit_node_id(branch.id, record.slug),
            branch=branch.id,
            slug=record.slug,
            title=record.title,
            summary=record.summary,
            date=record.date,
            x=branch.x,
            y=y,
        )
        merge = MergeNode(
            id=merge_node_id(record.slug),
            slug=record.slug,
            date=record.date,
            x=config.main_x,
            y=y,
        )
        nodes.extend((commit, merge))
        edges.append(GraphEdge(id=connector_edge_id(commit.id, merge.id), source=commit.id, target=merge.id))

    logger.debug("Built %d commit/merge nodes and %d connectors", len(nodes), len(edges))
    return nodes, edges
