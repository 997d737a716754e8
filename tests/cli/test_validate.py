"""
Tests for the validate subcommand.
"""

import json

import pytest
from click.testing import CliRunner

from cli import main
from cli.help_texts import ExitCodes
from tests.fixtures.manifests import (
    make_dialogue_scene,
    make_manifest,
    make_quiz_scene,
)


@pytest.fixture
def runner():
    return CliRunner()


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


class TestValidateCommand:
    """Test single-file validation."""

    def test_help(self, runner):
        result = runner.invoke(main, ["validate", "--help"])

        assert result.exit_code == 0
        assert "--batch" in result.output
        assert "--sanitized-output" in result.output

    def test_missing_input(self, runner):
        result = runner.invoke(main, ["validate"])

        assert result.exit_code == ExitCodes.MISSING_REQUIRED_OPTION
        assert "--input or --batch is required" in result.output

    def test_valid_manifest(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest())

        result = runner.invoke(main, ["validate", "--input", path])

        assert result.exit_code == ExitCodes.SUCCESS
        assert f"✅ {path}: Valid" in result.output

    def test_invalid_manifest(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest(total_duration=1200))

        result = runner.invoke(main, ["validate", "--input", path])

        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "Failed (business_rule)" in result.output
        assert "Total duration mismatch" in result.output

    def test_structural_failure_shows_suggestion(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest(total_duration=100))

        result = runner.invoke(main, ["validate", "--input", path])

        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "→ Value at total_duration is too small. Minimum: 300" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["validate", "--input", str(tmp_path / "missing.json")])

        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "File not found" in result.output

    def test_scene_type(self, runner, tmp_path):
        path = _write(tmp_path / "quiz.json", make_quiz_scene())

        result = runner.invoke(main, ["validate", "--input", path, "--type", "quiz"])

        assert result.exit_code == ExitCodes.SUCCESS

    def test_strict_fails_on_warnings(self, runner, tmp_path):
        scenes = [make_dialogue_scene("brief", 45), make_quiz_scene(scene_duration=300)]
        path = _write(tmp_path / "manifest.json", make_manifest(scenes=scenes, total_duration=345))

        relaxed = runner.invoke(main, ["validate", "--input", path])
        strict = runner.invoke(main, ["validate", "--input", path, "--strict"])

        assert relaxed.exit_code == ExitCodes.SUCCESS
        assert strict.exit_code == ExitCodes.VALIDATION_FAILED
        assert "Scene brief is very short (45s)" in strict.output


class TestValidateOutputs:
    """Test report, sanitized output and statistics."""

    def test_sanitized_output(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest(title="<script>x</script>Välkommen"))
        output = tmp_path / "out" / "clean.json"

        result = runner.invoke(main, ["validate", "--input", path, "--sanitized-output", str(output)])

        assert result.exit_code == ExitCodes.SUCCESS
        content = json.loads(output.read_text(encoding="utf-8"))
        assert content["title"] == "Välkommen"

    def test_sanitized_output_not_written_on_failure(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest(total_duration=1200))
        output = tmp_path / "clean.json"

        result = runner.invoke(main, ["validate", "--input", path, "--sanitized-output", str(output)])

        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert not output.exists()
        assert "Sanitized content not written" in result.output

    def test_report(self, runner, tmp_path):
        _write(tmp_path / "a.json", make_manifest())
        _write(tmp_path / "b.json", make_manifest(total_duration=1200))
        report = tmp_path / "report.json"

        result = runner.invoke(main, [
            "validate", "--batch", str(tmp_path / "*.json"), "--report", str(report),
        ])

        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["total"] == 2
        assert data["passed"] == 1
        assert data["failed"] == 1
        assert "sanitized_content" not in data["results"][0]

    def test_batch_summary(self, runner, tmp_path):
        _write(tmp_path / "a.json", make_manifest())
        _write(tmp_path / "b.json", make_manifest())

        result = runner.invoke(main, ["validate", "--batch", str(tmp_path / "*.json")])

        assert result.exit_code == ExitCodes.SUCCESS
        assert "✅ 2 passed" in result.output

    def test_stats(self, runner, tmp_path):
        _write(tmp_path / "a.json", make_manifest())
        _write(tmp_path / "b.json", make_manifest(total_duration=1200))

        result = runner.invoke(main, ["validate", "--batch", str(tmp_path / "*.json"), "--stats"])

        assert "Validation statistics:" in result.output
        assert "Success rate: 50.0%" in result.output
        assert "1x Total duration mismatch" in result.output


class TestValidateConfiguration:
    """Test configuration handling in the command."""

    def test_config_file(self, runner, tmp_path):
        scenes = [make_dialogue_scene("brief", 45), make_quiz_scene(scene_duration=300)]
        path = _write(tmp_path / "manifest.json", make_manifest(scenes=scenes, total_duration=345))
        config = tmp_path / "config.yaml"
        config.write_text("short_scene_seconds: 30\n", encoding="utf-8")

        result = runner.invoke(main, ["validate", "--input", path, "--strict", "--config", str(config)])

        assert result.exit_code == ExitCodes.SUCCESS

    def test_invalid_config(self, runner, tmp_path):
        path = _write(tmp_path / "manifest.json", make_manifest())
        config = tmp_path / "config.yaml"
        config.write_text("unknown_option: 1\n", encoding="utf-8")

        result = runner.invoke(main, ["validate", "--input", path, "--config", str(config)])

        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Configuration error" in result.output

    def test_environment_enforces_character_references(self, runner, tmp_path, monkeypatch):
        scene = make_dialogue_scene()
        scene["dialogue_turns"][0]["character_id"] = "ghost"
        path = _write(tmp_path / "manifest.json", make_manifest(scenes=[scene, make_quiz_scene()]))

        relaxed = runner.invoke(main, ["validate", "--input", path])
        monkeypatch.setenv("GATEKEEPER_ENFORCE_CHARACTER_REFS", "true")
        enforced = runner.invoke(main, ["validate", "--input", path])

        assert relaxed.exit_code == ExitCodes.SUCCESS
        assert enforced.exit_code == ExitCodes.VALIDATION_FAILED
        assert "references unknown character ghost" in enforced.output
