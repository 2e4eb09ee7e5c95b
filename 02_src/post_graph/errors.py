"""Exception hierarchy for graph layout and its pipeline."""


class PostGraphError(Exception):
    """Base class for every error raised by post_graph."""


class ConfigError(PostGraphError, ValueError):
    pass


class InvalidRecordError(PostGraphError, ValueError):
    """A record cannot be laid out (missing slug/title or unparseable date)."""

    def __init__(self, message: str, slug: str | None = None) -> None:
        super().__init__(message)
        self.slug = slug


class BranchIdError(PostGraphError, ValueError):
    """A primary tag cannot be turned into a usable branch id."""

    def __init__(self, message: str, tag: str) -> None:
        super().__init__(message)
        self.tag = tag


class ReservedBranchError(BranchIdError):
    pass


class DuplicateNodeError(PostGraphError, ValueError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Duplicate node id: {node_id}")
        self.node_id = node_id
