"""End-to-end tests for the command-line interface."""

import json
import logging

import pytest
import yaml

from solid_principles._package import DESCRIPTION, __version__
from solid_principles.bootstrap import Application
from solid_principles.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def reset_root_handlers():
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)


class TestCliRun:
    def test_run_shapes(self, capsys):
        assert main(["run", "shapes"]) == 0

        captured = capsys.readouterr()
        assert captured.out == (
            "Rectangle area: 20\n"
            "Square area: 25\n"
            "Updated Rectangle area: 30\n"
            "Updated Square area: 36\n"
        )
        assert captured.err == ""

    def test_run_birds_splits_streams(self, capsys):
        assert main(["run", "birds"]) == 0

        captured = capsys.readouterr()
        assert captured.out.splitlines()[:3] == ["Duck:", "I can fly", "I can swim"]
        assert captured.err.splitlines() == [
            "Penguin cannot fly",
            "Sparrow cannot swim",
            "Swan cannot fly",
        ]

    def test_run_payment(self, capsys):
        assert main(["run", "payment"]) == 0

        captured = capsys.readouterr()
        assert captured.err == "Failed to process $400 payment: Simulated error\n"

    def test_run_with_summary(self, capsys):
        assert main(["run", "calorie-tracker", "--summary"]) == 0

        out = capsys.readouterr().out
        first_line, _, summary = out.partition("\n")
        assert first_line == "Maximum calorie count of 2000 exceeded! -> 2200"
        assert json.loads(summary) == {"results": {"calorie-tracker": "ok"}}

    def test_run_unknown_example(self, capsys):
        assert main(["run", "missing"]) == 1

        assert "Unknown example: 'missing'" in capsys.readouterr().err

    def test_log_level_option_silences_info(self, capsys):
        assert main(["--log-level", "ERROR", "run", "birds"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert len(captured.err.splitlines()) == 3

    def test_json_log_format(self, capsys):
        assert main(["--log-format", "json", "run", "calorie-tracker"]) == 0

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "Maximum calorie count of 2000 exceeded! -> 2200"


class TestCliList:
    def test_list_json(self, capsys):
        assert main(["list"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [example["name"] for example in data["examples"]] == [
            "calorie-tracker",
            "quiz",
            "birds",
            "shapes",
            "entity-mixins",
            "entity-assembly",
            "payment",
        ]

    def test_list_yaml(self, capsys):
        assert main(["--format", "yaml", "list"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["examples"][0]["principle"] == "single-responsibility"

    def test_list_table(self, capsys):
        assert main(["--format", "table", "list"]) == 0

        out = capsys.readouterr().out
        assert "entity-assembly" in out
        assert "dependency-inversion" in out


class TestCliErrors:
    def test_failed_example_exits_with_one(self, monkeypatch, capsys):
        monkeypatch.setattr(Application, "run", lambda self, names=None: {"shapes": "failed"})

        assert main(["run", "shapes", "--summary"]) == 1

        assert json.loads(capsys.readouterr().out) == {"results": {"shapes": "failed"}}

    def test_help_describes_the_package(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])

        assert DESCRIPTION in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])

        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 1

        assert "No command specified" in capsys.readouterr().err

    def test_bad_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.json"), "list"]) == 1

        assert "Configuration file not found" in capsys.readouterr().err

    def test_config_file_selects_examples(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("examples:\n  enabled:\n    - calorie-tracker\n")

        assert main(["--config", str(config_file), "run"]) == 0

        assert capsys.readouterr().out == "Maximum calorie count of 2000 exceeded! -> 2200\n"

    def test_parse_args_defaults(self):
        args = parse_args(["run"])

        assert args.command == "run"
        assert args.examples == []
        assert args.format == "json"
        assert args.summary is False
