"""CLI entrypoint helpers for the post graph pipeline."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

from .config import LayoutConfig
from .errors import PostGraphError
from .graph_model import GraphModel
from .layout import branch_ranges, canvas_height
from .phases import GraphLayoutPhase, RecordIngestionPhase, ValidationAndQAPhase
from .pipeline import PipelinePhase, PipelineRunner

logger = logging.getLogger(__name__)


def build_default_phases(config: LayoutConfig | None = None) -> List[PipelinePhase]:
    return [
        RecordIngestionPhase(),
        GraphLayoutPhase(config),
        ValidationAndQAPhase(),
    ]


def run_pipeline(
    input_path: str = "",
    today: date | None = None,
    sort: bool = False,
    config: LayoutConfig | None = None,
) -> Dict[str, Any]:
    config = config or LayoutConfig.from_env()
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "today": today or date.today(),
        "sort": sort,
        "layout_config": config,
    }
    runner = PipelineRunner(phases=build_default_phases(config))
    final_context = runner.run(initial_context)

    model: GraphModel = final_context["graph_model"]
    artifact = model.to_json()
    artifact["meta"] = {
        "input_path": input_path,
        "today": initial_context["today"].isoformat(),
        "canvas_height": canvas_height(model, config),
        "branch_ranges": {
            branch_id: {"min_y": low, "max_y": high}
            for branch_id, (low, high) in branch_ranges(model, config).items()
        },
        "validation_report": final_context.get("validation_report", {}),
    }
    return artifact


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from error


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lay out posts as a commit graph and save JSON artifact.")
    parser.add_argument(
        "--input-path",
        default="",
        help="JSON file with a list of posts (or an object with a 'posts' list). Uses a sample when omitted.",
    )
    parser.add_argument(
        "--output-path",
        default="graph_artifact.json",
        help="Where to save resulting graph artifact JSON.",
    )
    parser.add_argument(
        "--today",
        type=_parse_day,
        default=None,
        help="Date used for the today marker (YYYY-MM-DD). Defaults to the current date.",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort posts newest first before layout.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        artifact = run_pipeline(input_path=args.input_path, today=args.today, sort=args.sort)
    except (PostGraphError, FileNotFoundError) as error:
        logger.debug("Pipeline failed", exc_info=True)
        print(f"error: {error}", file=sys.stderr)
        return 2

    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Graph artifact saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"branches={len(artifact['branches'])}",
        f"nodes={len(artifact['nodes'])}",
        f"edges={len(artifact['edges'])}",
        f"warnings={len(artifact['meta']['validation_report'].get('warnings', []))}",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
