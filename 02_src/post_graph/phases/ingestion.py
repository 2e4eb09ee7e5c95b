"""Record ingestion phase with JSON support and fallback sample."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..errors import InvalidRecordError
from ..pipeline import PipelinePhase
from ..records import PostRecord, coerce_records

logger = logging.getLogger(__name__)


class RecordIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        input_path = context.get("input_path")
        if input_path:
            payloads = self._load_json(Path(str(input_path)))
        else:
            payloads = self._build_fallback_payloads()

        records = coerce_records(payloads)
        if context.get("sort"):
            records = self._sort_newest_first(records)

        logger.info(
            "Ingested %d records (%d drafts) from %s",
            len(records),
            sum(1 for record in records if record.draft),
            input_path or "built-in sample",
        )
        return {"input_path": input_path, "records": records}

    def _build_fallback_payloads(self) -> List[Dict[str, Any]]:
        return [
            {
                "slug": "hello-graph",
                "title": "Hello, graph",
                "summary": "Posts rendered as commits on category lanes.",
                "date": "2024-12-20",
                "tags": ["technology"],
            },
            {
                "slug": "autumn-run",
                "title": "Autumn half marathon",
                "date": "2024-11-15",
                "tags": ["fitness"],
            },
            {
                "slug": "notes",
                "title": "Untagged notes",
                "date": "2023-11-01",
                "tags": [],
            },
        ]

    @staticmethod
    def _load_json(input_path: Path) -> List[Dict[str, Any]]:
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        payload = json.loads(input_path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("posts", [])
        if not isinstance(payload, list):
            raise InvalidRecordError(f"Expected a list of posts in {input_path}")
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise InvalidRecordError(f"Post #{index} in {input_path} is not an object")
        return payload

    @staticmethod
    def _sort_newest_first(records: List[PostRecord]) -> List[PostRecord]:
        return sorted(records, key=lambda record: record.day, reverse=True)
