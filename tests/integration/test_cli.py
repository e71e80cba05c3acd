"""
CLI Integration Tests
=====================

Tests the command line interface with the network layer mocked out.
"""

import json
import logging
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from main import cli
from src.font_directory.core.config import DirectoryConfig
from src.font_directory.core.exceptions import ProbeFailedError
from src.font_directory.core.models import FontStyles, OutputTable
from src.font_directory.directory.pipeline import PipelineResult

pytestmark = pytest.mark.integration


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def root_log_level():
    """Restore the root logger level changed by the CLI."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.fixture
def table():
    return OutputTable({"Roboto": FontStyles(normal={"700": "bb", "400": "aa"}, italic={})})


class TestGenerateCommand:
    """Test the generate command."""

    def test_writes_output(self, runner, table, temp_dir):
        output = temp_dir / "data.json"
        result_obj = PipelineResult(
            url="http://x/directory009.pb", table=table, output=table.to_json()
        )

        with patch("main.run_pipeline", return_value=result_obj) as run:
            result = runner.invoke(cli, ["generate", "--output", str(output), "--no-progress"])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "Roboto": {"normal": {"700": "bb", "400": "aa"}, "italic": {}}
        }
        config = run.call_args.args[0]
        assert config.output_path == output
        assert config.show_progress is False

    def test_failure_exits_without_writing(self, runner, temp_dir):
        output = temp_dir / "data.json"
        failed = PipelineResult(error=ProbeFailedError("http://x/directory008.pb", "boom"))

        with patch("main.run_pipeline", return_value=failed):
            result = runner.invoke(cli, ["generate", "--output", str(output)])

        assert result.exit_code == 1
        assert not output.exists()

    def test_config_file_and_initial_version(self, runner, table, temp_dir):
        config_path = temp_dir / "fonts.yaml"
        with config_path.open("w") as f:
            yaml.dump({"initial_version": 3, "output_path": str(temp_dir / "from_yaml.json")}, f)
        result_obj = PipelineResult(table=table, output=table.to_json())

        with patch("main.run_pipeline", return_value=result_obj) as run:
            result = runner.invoke(
                cli, ["generate", "--config", str(config_path), "--initial-version", "11"]
            )

        assert result.exit_code == 0, result.output
        config = run.call_args.args[0]
        assert config.initial_version == 11
        assert (temp_dir / "from_yaml.json").exists()

    @pytest.mark.parametrize(("args", "expected"), [([], logging.WARNING), (["-v"], logging.DEBUG)])
    def test_log_level_from_config(self, runner, table, temp_dir, root_log_level, args, expected):
        config_path = temp_dir / "fonts.yaml"
        config_path.write_text(f"log_level: warning\noutput_path: {temp_dir / 'out.json'}\n")
        result_obj = PipelineResult(table=table, output=table.to_json())

        with patch("main.run_pipeline", return_value=result_obj):
            result = runner.invoke(cli, [*args, "generate", "--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert root_log_level.level == expected

    def test_rejects_negative_initial_version(self, runner):
        result = runner.invoke(cli, ["generate", "--initial-version", "-1"])

        assert result.exit_code == 2


class TestLatestCommand:
    """Test the latest command."""

    def test_prints_latest_url(self, runner, versioned_session):
        session = versioned_session(existing={7, 8})

        config = DirectoryConfig(_env_file=None, base_url="http://fonts.example.com/s/f/directory")

        with patch("main.create_session", return_value=session), patch(
            "main.DirectoryConfig.from_env_and_yaml", return_value=config
        ):
            result = runner.invoke(cli, ["latest"])

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "http://fonts.example.com/s/f/directory008.pb"
        session.close.assert_called_once()


class TestShowCommand:
    """Test the show command."""

    def test_shows_family(self, runner, table, temp_dir):
        data = temp_dir / "data.json"
        data.write_text(table.to_json(), encoding="utf-8")

        result = runner.invoke(cli, ["show", "Roboto", "--data", str(data)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Roboto (normal)", "  400: aa", "  700: bb"]

    def test_no_italic_fonts(self, runner, table, temp_dir):
        data = temp_dir / "data.json"
        data.write_text(table.to_json(), encoding="utf-8")

        result = runner.invoke(cli, ["show", "Roboto", "--data", str(data), "--italic"])

        assert result.exit_code == 0
        assert "Roboto has no italic fonts" in result.stdout

    def test_unknown_family(self, runner, table, temp_dir):
        data = temp_dir / "data.json"
        data.write_text(table.to_json(), encoding="utf-8")

        result = runner.invoke(cli, ["show", "Arial", "--data", str(data)])

        assert result.exit_code == 1

    def test_corrupt_data_file(self, runner, temp_dir):
        data = temp_dir / "data.json"
        data.write_text('{"Roboto": {"normal": {"bold": "aa"}}}', encoding="utf-8")

        result = runner.invoke(cli, ["show", "Roboto", "--data", str(data)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
