"""Pipeline phases for post graph generation."""

from .ingestion import RecordIngestionPhase
from .layout import GraphLayoutPhase
from .validation import ValidationAndQAPhase

__all__ = [
    "RecordIngestionPhase",
    "GraphLayoutPhase",
    "ValidationAndQAPhase",
]
