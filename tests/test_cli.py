"""
Test Suite for the Command-Line Interface
"""

import json

import pytest

from cli import CLI


@pytest.fixture
def cli():
    return CLI()


class TestGenerateCommand:
    """Test the generate command"""

    def test_json_to_stdout(self, cli, capsys):
        assert cli.run(["generate", "--count", "3"]) == 0

        records = json.loads(capsys.readouterr().out)
        assert len(records) == 3

    def test_format_inferred_from_output_file(self, cli, tmp_path):
        output = tmp_path / "users.csv"

        assert cli.run(["generate", "-n", "2", "-o", str(output)]) == 0

        lines = output.read_text(encoding="utf-8").split("\n")
        assert len(lines) == 3
        assert lines[0].startswith("id,username,email")

    def test_explicit_format_wins_over_extension(self, cli, tmp_path):
        output = tmp_path / "users.csv"

        assert cli.run(["generate", "-n", "1", "-f", "json", "-o", str(output)]) == 0

        assert len(json.loads(output.read_text(encoding="utf-8"))) == 1

    def test_config_file(self, cli, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("generation:\n  count: 4\n  format: json\n", encoding="utf-8")
        output = tmp_path / "out.json"

        assert cli.run(["generate", "-c", str(config_path), "-o", str(output)]) == 0

        assert len(json.loads(output.read_text(encoding="utf-8"))) == 4

    def test_config_file_layers_over_preset(self, cli, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("generation:\n  count: 2\n", encoding="utf-8")
        output = tmp_path / "out.json"

        assert cli.run(["generate", "-p", "demo", "-c", str(config_path), "-o", str(output)]) == 0

        text = output.read_text(encoding="utf-8")
        assert len(json.loads(text)) == 2
        assert text.startswith("[\n")

    def test_config_file_with_unknown_key_fails(self, cli, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("generation:\n  num_rows: 5\n", encoding="utf-8")

        assert cli.run(["generate", "-c", str(config_path)]) == 1

        assert "num_rows" in capsys.readouterr().err

    def test_malformed_config_file_fails(self, cli, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("generation: [unclosed\n", encoding="utf-8")

        assert cli.run(["generate", "-c", str(config_path)]) == 1

        assert "Error" in capsys.readouterr().err

    def test_unsupported_type_fails(self, cli, capsys):
        assert cli.run(["generate", "--type", "vehicle"]) == 1

        assert "Unsupported data type: vehicle" in capsys.readouterr().err

    def test_negative_count_fails_validation(self, cli, capsys):
        assert cli.run(["generate", "--count", "-1"]) == 1

        assert "count" in capsys.readouterr().err


class TestOtherCommands:
    """Test metrics and config commands"""

    def test_metrics(self, cli, capsys):
        assert cli.run(["metrics", "user"]) == 0

        assert json.loads(capsys.readouterr().out) == {"uniqueValues": 0, "nullCount": 0, "distribution": {}}

    def test_config_create(self, cli, tmp_path):
        output = tmp_path / "new.yaml"

        assert cli.run(["config", "create", str(output)]) == 0
        assert "generation:" in output.read_text()

    def test_config_show_unknown_preset(self, cli):
        assert cli.run(["config", "show", "missing"]) == 1
