"""Tests for the rdftypes CLI."""

import json

from typer.testing import CliRunner

from rdftypes._version import __version__
from rdftypes.cli.main import EXIT_CONFIG, EXIT_INVALID, app

runner = CliRunner()


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestRulesCommand:
    def test_lists_rules(self, rule_file):
        result = runner.invoke(app, ["rules", "--config", str(rule_file)])

        assert result.exit_code == 0
        assert "image" in result.stdout
        assert "thumbnail" in result.stdout

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["rules", "--config", str(tmp_path / "nope.yml")])

        assert result.exit_code == EXIT_CONFIG
        assert "not found" in result.stdout

    def test_malformed_config(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("- required: true\n")

        result = runner.invoke(app, ["rules", "--config", str(path)])

        assert result.exit_code == EXIT_CONFIG


class TestCheckCommand:
    def test_valid(self, rule_file):
        result = runner.invoke(app, ["check", "image", "thumbnail", "--config", str(rule_file)])

        assert result.exit_code == 0
        assert "valid" in result.stdout

    def test_invalid_json(self, rule_file):
        result = runner.invoke(
            app, ["check", "image", "image", "ocr", "--config", str(rule_file), "--json"]
        )

        assert result.exit_code == EXIT_INVALID
        verdict = json.loads(result.stdout)
        assert verdict["disallowed"] == ["ocr"]
        assert verdict["disallowed_duplicates"] == ["image"]
        assert verdict["valid"] is False

    def test_strict_reports_first_category(self, rule_file):
        result = runner.invoke(
            app, ["check", "thumbnail", "thumbnail", "ocr", "--config", str(rule_file), "--strict"]
        )

        assert result.exit_code == EXIT_INVALID
        assert "disallowed: ocr" in result.stdout
        assert "missing_required" not in result.stdout

    def test_empty_file_set(self, rule_file):
        result = runner.invoke(app, ["check", "--config", str(rule_file), "--json"])

        assert result.exit_code == EXIT_INVALID
        assert json.loads(result.stdout)["missing_required"] == ["image"]

    def test_strict_json(self, rule_file):
        result = runner.invoke(
            app, ["check", "thumbnail", "ocr", "--config", str(rule_file), "--strict", "--json"]
        )

        assert result.exit_code == EXIT_INVALID
        assert json.loads(result.stdout) == {"valid": False, "category": "disallowed", "tags": ["ocr"]}

    def test_strict_json_valid(self, rule_file):
        result = runner.invoke(app, ["check", "image", "--config", str(rule_file), "--strict", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"valid": True}


class TestCheckFileCommand:
    def test_file_sets(self, rule_file, tmp_path):
        data = [
            {"id": "fs-1", "files": ["image", "thumbnail"]},
            {"id": "fs-2", "files": [{"type": "thumbnail"}]},
        ]
        source = tmp_path / "file_sets.json"
        source.write_text(json.dumps(data))
        output = tmp_path / "report.json"

        result = runner.invoke(
            app,
            ["check-file", str(source), "--config", str(rule_file), "--output", str(output)],
        )

        assert result.exit_code == EXIT_INVALID
        assert "1 invalid" in result.stdout
        report = json.loads(output.read_text())
        assert report["fs-1"]["valid"] is True
        assert report["fs-2"]["missing_required"] == ["image"]

    def test_single_file_set(self, rule_file, tmp_path):
        source = tmp_path / "file_set.json"
        source.write_text(json.dumps({"id": "fs-1", "files": ["image"]}))

        result = runner.invoke(app, ["check-file", str(source), "--config", str(rule_file)])

        assert result.exit_code == 0

    def test_missing_input(self, tmp_path):
        result = runner.invoke(app, ["check-file", str(tmp_path / "absent.json")])

        assert result.exit_code == EXIT_CONFIG

    def test_malformed_json(self, rule_file, tmp_path):
        source = tmp_path / "broken.json"
        source.write_text("{not json")

        result = runner.invoke(app, ["check-file", str(source), "--config", str(rule_file)])

        assert result.exit_code == EXIT_CONFIG
        assert "Invalid file set data" in " ".join(result.stdout.split())

    def test_string_files_rejected(self, rule_file, tmp_path):
        source = tmp_path / "file_set.json"
        source.write_text(json.dumps({"id": "fs-1", "files": "image"}))

        result = runner.invoke(app, ["check-file", str(source), "--config", str(rule_file)])

        assert result.exit_code == EXIT_CONFIG
        assert "must be a list" in " ".join(result.stdout.split())
