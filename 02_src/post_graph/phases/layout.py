"""Graph layout phase."""

from datetime import date
from typing import Any, Dict

from ..config import LayoutConfig
from ..layout import GraphLayoutWorkflow
from ..pipeline import PipelinePhase


class GraphLayoutPhase(PipelinePhase):
    phase_name = "layout"

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config = config

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        config = self._config or context.get("layout_config") or LayoutConfig()
        today = context.get("today")
        if not isinstance(today, date):
            raise TypeError("Layout phase needs a 'today' date in context.")
        model = GraphLayoutWorkflow(config).run(context.get("records", []), today)
        return {"layout_config": config, "graph_model": model}
