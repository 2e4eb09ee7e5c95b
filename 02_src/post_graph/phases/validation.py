"""Validation and QA phase over the laid-out graph."""

from typing import Any, Dict, List

from ..config import MAIN_BRANCH_ID
from ..graph_model import CommitNode, GraphModel, MergeNode
from ..pipeline import PipelinePhase


class ValidationAndQAPhase(PipelinePhase):
    phase_name = "validation"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        model: GraphModel = context["graph_model"]
        commits = [node for node in model.nodes if isinstance(node, CommitNode)]
        merges = [node for node in model.nodes if isinstance(node, MergeNode)]
        qa_report = {
            "branch_count": len(model.branches),
            "commit_count": len(commits),
            "merge_count": len(merges),
            "separator_count": len(model.nodes_of_type("separator")),
            "today_count": len(model.nodes_of_type("today")),
            "edge_count": len(model.edges),
            "warnings": self._collect_warnings(model, commits, merges),
        }
        return {"validation_report": qa_report}

    @staticmethod
    def _collect_warnings(
        model: GraphModel,
        commits: List[CommitNode],
        merges: List[MergeNode],
    ) -> List[Dict[str, Any]]:
        warnings: List[Dict[str, Any]] = []

        node_ids = [node.id for node in model.nodes]
        if len(node_ids) != len(set(node_ids)):
            warnings.append({"code": "duplicate_node_ids"})

        known_ids = set(node_ids)
        for edge in model.edges:
            if edge.source not in known_ids or edge.target not in known_ids:
                warnings.append({"code": "dangling_edge", "edge_id": edge.id})

        for previous, current in zip(commits, commits[1:]):
            if current.y <= previous.y:
                warnings.append({"code": "non_increasing_commit_y", "node_id": current.id})

        lane_commits = [commit for commit in commits if commit.branch != MAIN_BRANCH_ID]
        if len(lane_commits) != len(merges):
            warnings.append(
                {
                    "code": "merge_count_mismatch",
                    "lane_commits": len(lane_commits),
                    "merges": len(merges),
                }
            )

        merge_rows = {(merge.slug, merge.y) for merge in merges}
        for commit in lane_commits:
            if (commit.slug, commit.y) not in merge_rows:
                warnings.append({"code": "unpaired_lane_commit", "node_id": commit.id})

        return warnings
