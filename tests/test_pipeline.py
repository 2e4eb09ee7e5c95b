"""Tests for the phase runner, pipeline phases and CLI."""

import json
from datetime import date
from typing import Any, Dict

import pytest

from post_graph.cli import main, run_pipeline
from post_graph.config import LayoutConfig
from post_graph.phases import GraphLayoutPhase, RecordIngestionPhase, ValidationAndQAPhase
from post_graph.pipeline import PipelinePhase, PipelineRunner


class _BrokenPhase(PipelinePhase):
    phase_name = "broken"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        return None  # type: ignore[return-value]


class TestPipelineRunner:
    def test_non_dict_result_raises(self) -> None:
        with pytest.raises(TypeError, match="broken"):
            PipelineRunner([_BrokenPhase()]).run({})


class TestRecordIngestionPhase:
    def test_fallback_sample(self) -> None:
        result = RecordIngestionPhase().run({})
        assert [record.slug for record in result["records"]] == ["hello-graph", "autumn-run", "notes"]

    def test_loads_posts_object(self, tmp_path, make_post) -> None:
        path = tmp_path / "posts.json"
        path.write_text(
            json.dumps({"posts": [make_post("a", "2024-01-01"), make_post("b", "2024-06-01")]}),
            encoding="utf-8",
        )
        result = RecordIngestionPhase().run({"input_path": str(path), "sort": True})
        assert [record.slug for record in result["records"]] == ["b", "a"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            RecordIngestionPhase().run({"input_path": str(tmp_path / "missing.json")})


class TestValidationAndQAPhase:
    def test_report_counts(self) -> None:
        context: Dict[str, Any] = {"today": date(2025, 1, 1)}
        for phase in (RecordIngestionPhase(), GraphLayoutPhase(LayoutConfig())):
            context.update(phase.run(context))
        report = ValidationAndQAPhase().run(context)["validation_report"]

        assert report == {
            "branch_count": 3,
            "commit_count": 3,
            "merge_count": 2,
            "separator_count": 2,
            "today_count": 1,
            "edge_count": 2,
            "warnings": [],
        }


class TestLayoutPhase:
    def test_requires_today(self) -> None:
        with pytest.raises(TypeError):
            GraphLayoutPhase().run({"records": []})


class TestCli:
    def test_run_pipeline_meta(self) -> None:
        artifact = run_pipeline(today=date(2025, 1, 1), config=LayoutConfig())

        assert artifact["meta"]["today"] == "2025-01-01"
        assert artifact["meta"]["canvas_height"] == len(artifact["nodes"]) * 48 + 48
        assert artifact["meta"]["branch_ranges"]["fitness"] == {"min_y": 72, "max_y": 72}
        assert artifact["meta"]["validation_report"]["warnings"] == []

    def test_main_writes_artifact(self, tmp_path, make_post, capsys) -> None:
        input_path = tmp_path / "posts.json"
        input_path.write_text(json.dumps([make_post("a", "2024-01-01", "life")]), encoding="utf-8")
        output_path = tmp_path / "out" / "graph.json"

        exit_code = main(
            [
                "--input-path",
                str(input_path),
                "--output-path",
                str(output_path),
                "--today",
                "2025-01-01",
            ]
        )

        assert exit_code == 0
        artifact = json.loads(output_path.read_text(encoding="utf-8"))
        assert [node["id"] for node in artifact["nodes"]] == [
            "commit-life-a",
            "merge-a",
            "today-marker",
        ]
        assert "nodes=3" in capsys.readouterr().out

    def test_main_reports_invalid_input(self, tmp_path, make_post, capsys) -> None:
        input_path = tmp_path / "posts.json"
        input_path.write_text(json.dumps([make_post("a", "not-a-date")]), encoding="utf-8")

        exit_code = main(["--input-path", str(input_path), "--output-path", str(tmp_path / "o.json")])

        assert exit_code == 2
        assert "unparseable date" in capsys.readouterr().err
