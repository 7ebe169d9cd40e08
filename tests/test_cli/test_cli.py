"""Tests for the partlog CLI (click)."""

import json
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from partlog.bootstrap import set_logging
from partlog.cli import EXIT_CONFIG_ERROR, main
from partlog.logging.setup import _reset_handlers

CONFIG = """\
data_dir: {data_dir}
logging:
  root:
    level: Info
    console: false
    file: log/root.log
  agora.network:
    level: Trace
  agora.quiet:
    level: None
"""


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    for var in ("PARTLOG_LOG_LEVEL", "PARTLOG_LOG_FILE", "PARTLOG_DATA_DIR"):
        monkeypatch.delenv(var, raising=False)
    yield
    _reset_handlers()
    structlog.reset_defaults()
    set_logging(None)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG.format(data_dir=tmp_path))
    return path


class TestValidateConfig:
    def test_valid(self, runner, config_file):
        result = runner.invoke(main, ["validate-config", "-c", str(config_file)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.output
        assert "Loggers defined: 2" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["validate-config", "-c", str(tmp_path / "nope.yaml")])
        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_invalid_level(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  root:\n    level: loud\n")
        result = runner.invoke(main, ["validate-config", "-c", str(path)])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Invalid configuration" in result.output


class TestLevels:
    def test_configured_partitions(self, runner, config_file):
        result = runner.invoke(main, ["levels", "-c", str(config_file)])
        assert result.exit_code == 0
        lines = [line.split() for line in result.output.splitlines()]
        assert ["root", "info"] in lines
        assert ["agora.network", "trace"] in lines
        assert ["agora.quiet", "none"] in lines

    def test_given_partitions(self, runner, config_file):
        result = runner.invoke(
            main, ["levels", "-c", str(config_file), "agora.network.peer", "storage"]
        )
        lines = [line.split() for line in result.output.splitlines()]
        assert ["agora.network.peer", "trace"] in lines
        assert ["storage", "info"] in lines

    def test_root_override(self, runner, config_file):
        result = runner.invoke(
            main, ["levels", "-c", str(config_file), "--log-level", "error", "storage"]
        )
        assert ["storage", "error"] in [line.split() for line in result.output.splitlines()]


class TestEmit:
    def test_emitted(self, runner, config_file, tmp_path):
        result = runner.invoke(
            main, ["emit", "-c", str(config_file), "-l", "error", "net", "conn", "42", "failed"]
        )
        assert result.exit_code == 0, result.output
        assert "emitted: net error" in result.output

        records = [
            json.loads(line)
            for line in (tmp_path / "log" / "root.log").read_text().splitlines()
        ]
        assert records[-1]["event"] == "conn 42 failed"
        assert records[-1]["partition"] == "net"

    def test_filtered(self, runner, config_file, tmp_path):
        result = runner.invoke(
            main, ["emit", "-c", str(config_file), "-l", "debug", "storage", "hidden"]
        )
        assert result.exit_code == 0
        assert "filtered: storage debug" in result.output
        assert "hidden" not in (tmp_path / "log" / "root.log").read_text()

    def test_disabled_partition(self, runner, config_file):
        result = runner.invoke(
            main, ["emit", "-c", str(config_file), "-l", "fatal", "agora.quiet", "x"]
        )
        assert "filtered: agora.quiet fatal" in result.output

    def test_requires_message(self, runner, config_file):
        result = runner.invoke(main, ["emit", "-c", str(config_file), "net"])
        assert result.exit_code != 0
