"""Unit tests for Typer-based CLI interface."""

import json
from pathlib import Path
from typing import Callable
from unittest.mock import Mock

from typer.testing import CliRunner

from plugin_check.domain.config import ConfigurationLoader
from plugin_check.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from plugin_check.infrastructure.gateways.json_wire_gateway import JsonWireCodec
from plugin_check.interface.cli import CLIAppFactory, CLIDependencies
from plugin_check.interface.reporters import TextAnnotationReporter
from plugin_check.use_cases.merge_annotations import (
    EncodeResponseUseCase,
    MergeAnnotationsUseCase,
)

runner = CliRunner()


def _make_deps(config: dict[str, object] | None = None, **overrides: object) -> CLIDependencies:
    """Create CLIDependencies with real gateways and a mock telemetry."""
    merge = MergeAnnotationsUseCase()
    defaults: dict[str, object] = {
        "config_loader": ConfigurationLoader(config or {}, {}),
        "telemetry": Mock(),
        "filesystem": FileSystemGateway(),
        "wire_codec": JsonWireCodec(indent=2),
        "reporter": TextAnnotationReporter(),
        "merge_use_case": merge,
        "encode_use_case": EncodeResponseUseCase(merge),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)  # type: ignore[arg-type]


BATCH_B = [{"rule_id": "B", "file_location": {"file_path": "f.proto", "start_line": 10}}]
BATCH_A = {
    "annotations": [
        {"rule_id": "A", "file_location": {"file_path": "f.proto", "start_line": 10}},
        {"rule_id": "A", "message": "first", "file_location": {"file_path": "f.proto", "start_line": 5}},
    ]
}


class TestMergeCommand:
    """The merge command."""

    def test_merges_files_into_sorted_json(self, write_batch: Callable[[str, object], Path]) -> None:
        one = write_batch("one.json", BATCH_B)
        two = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", str(one), str(two)])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert [
            (a["rule_id"], a["file_location"]["start_line"]) for a in payload["annotations"]
        ] == [("A", 5), ("A", 10), ("B", 10)]

    def test_file_order_does_not_matter(self, write_batch: Callable[[str, object], Path]) -> None:
        one = write_batch("one.json", BATCH_B)
        two = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        forward = runner.invoke(app, ["merge", str(one), str(two)])
        backward = runner.invoke(app, ["merge", str(two), str(one)])
        assert forward.stdout == backward.stdout

    def test_directory_input(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("batches/one.json", BATCH_B)
        write_batch("batches/two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", str(path.parent)])
        assert len(json.loads(result.stdout)["annotations"]) == 3

    def test_text_format(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", "--format", "text", str(path)])
        assert result.exit_code == 1
        assert result.stdout.splitlines() == ["f.proto:6:1:A first", "f.proto:11:1:A"]

    def test_format_from_config(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps({"output_format": "text"}))
        result = runner.invoke(app, ["merge", str(path)])
        assert result.stdout.startswith("f.proto:6:1:A first")

    def test_invalid_format(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", "--format", "xml", str(path)])
        assert result.exit_code == 2

    def test_fail_on_annotations_disabled(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps({"fail_on_annotations": False}))
        result = runner.invoke(app, ["merge", str(path)])
        assert result.exit_code == 0

    def test_empty_batch_exits_zero(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("empty.json", [])
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"annotations": []}

    def test_output_file(self, tmp_path: Path, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("one.json", BATCH_B)
        telemetry = Mock()
        app = CLIAppFactory.create_app(_make_deps(telemetry=telemetry))
        out = tmp_path / "out" / "response.json"
        result = runner.invoke(app, ["merge", "-o", str(out), str(path)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert json.loads(out.read_text(encoding="utf-8"))["annotations"][0]["rule_id"] == "B"
        telemetry.step.assert_any_call(f"Wrote 1 annotation(s) to {out}")

    def test_malformed_batch_exits_two(self, write_batch: Callable[[str, object], Path]) -> None:
        good = write_batch("good.json", BATCH_B)
        bad = write_batch("bad.json", [{"rule_id": ""}])
        telemetry = Mock()
        app = CLIAppFactory.create_app(_make_deps(telemetry=telemetry))
        result = runner.invoke(app, ["merge", str(good), str(bad)])
        assert result.exit_code == 2
        telemetry.error.assert_called_once()
        assert "annotations" not in result.stdout

    def test_unwrapped_annotation_object_exits_two(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("single.json", {"rule_id": "FIELD_NO_DELETE", "message": "gone"})
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", str(path)])
        assert result.exit_code == 2
        assert "annotations" not in result.stdout

    def test_misspelled_annotations_key_exits_two(self, write_batch: Callable[[str, object], Path]) -> None:
        path = write_batch("typo.json", {"annotation": [{"rule_id": "R1"}]})
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 2
        assert "OK" not in result.stdout

    def test_missing_file_exits_two(self, tmp_path: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["merge", str(tmp_path / "missing.json")])
        assert result.exit_code == 2


class TestValidateCommand:
    """The validate command."""

    def test_reports_counts(self, write_batch: Callable[[str, object], Path]) -> None:
        one = write_batch("one.json", BATCH_B)
        two = write_batch("two.json", BATCH_A)
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["validate", str(one), str(two)])
        assert result.exit_code == 0
        assert f"{one}: 1 annotation(s)" in result.stdout
        assert f"{two}: 2 annotation(s)" in result.stdout
        assert "2 batch file(s) OK" in result.stdout

    def test_invalid_json_exits_two(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{oops", encoding="utf-8")
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["validate", str(bad)])
        assert result.exit_code == 2
