"""Branch lanes derived from primary tags."""

import logging
import re
from typing import Dict, Iterable, List, Tuple

from ..config import MAIN_BRANCH_ID, LayoutConfig
from ..errors import ReservedBranchError
from ..graph_model import Branch
from ..records import PostRecord

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^\w\- ]", flags=re.UNICODE)


def slugify_tag(tag: str) -> str:
    """GitHub-style heading slug: lower-case, drop punctuation, spaces become hyphens."""
    return _NON_SLUG_CHARS.sub("", tag.lower()).replace(" ", "-")


class BranchRegistry:
    """Ordered lanes (main first) with lookup by branch id."""

    def __init__(self, branches: Iterable[Branch]) -> None:
        self.branches: Tuple[Branch, ...] = tuple(branches)
        self._by_id: Dict[str, Branch] = {branch.id: branch for branch in self.branches}

    @property
    def main(self) -> Branch:
        return self._by_id[MAIN_BRANCH_ID]

    def get(self, branch_id: str) -> Branch | None:
        return self._by_id.get(branch_id)

    def for_tag(self, tag: str | None) -> Branch | None:
        if not tag:
            return None
        return self._by_id.get(slugify_tag(tag))

    def __len__(self) -> int:
        return len(self.branches)

    def __iter__(self):
        return iter(self.branches)


def collect_primary_tags(records: Iterable[PostRecord]) -> List[str]:
    seen: Dict[str, None] = {}
    for record in records:
        tag = record.primary_tag
        if tag:
            seen.setdefault(tag, None)
    return sorted(seen, key=lambda tag: (tag.lower(), tag))


def build_branch_registry(records: Iterable[PostRecord], config: LayoutConfig) -> BranchRegistry:
    """Lay out main plus one lane per distinct primary tag of published records.

    Tag lanes fan out to the left of main; the alphabetically last tag sits
    next to main.
    """
    lanes: Dict[str, str] = {}
    for tag in collect_primary_tags(record for record in records if not record.draft):
        branch_id = slugify_tag(tag)
        if not branch_id:
            logger.debug("Tag %r has no slug characters; its posts stay on main", tag)
            continue
        if branch_id == MAIN_BRANCH_ID:
            raise ReservedBranchError(
                f"Tag {tag!r} collides with the reserved branch id {MAIN_BRANCH_ID!r}", tag=tag
            )
        # spellings sharing a slug share the lane of the first one in sort order
        lanes.setdefault(branch_id, tag)

    total = len(lanes)
    branches: List[Branch] = [
        Branch(id=MAIN_BRANCH_ID, name=MAIN_BRANCH_ID, color=config.main_color, x=config.main_x)
    ]
    for rank, (branch_id, tag) in enumerate(lanes.items()):
        branches.append(
            Branch(
                id=branch_id,
                name=tag,
                color=config.branch_color(rank),
                x=config.main_x - (total - rank) * config.branch_spacing,
            )
        )

    logger.debug("Registered %d tag branches: %s", total, list(lanes))
    return BranchRegistry(branches)
