"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import jailconf
from jailconf.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def bad_conf(tmp_path: Path) -> Path:
    conf = tmp_path / "bad.conf"
    conf.write_text('www {\n  exec.start = "/bin/sh /etc/rc;\n}\n')
    return conf


class TestParseCommand:
    """Tests for `jailconf parse`."""

    def test_parse_json(self, cli_runner: CliRunner, ioc_test_jail_conf: Path):
        result = cli_runner.invoke(app, ["parse", str(ioc_test_jail_conf)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        block = data["blocks"][0]
        assert block["name"] == "ioc-test-jail"
        assert [p["operator"] for p in block["parameters"]] == [
            "append",
            "set",
            "set",
            "presence",
        ]

    def test_parse_tree(self, cli_runner: CliRunner, full_conf: Path):
        result = cli_runner.invoke(app, ["parse", str(full_conf), "--format", "tree"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "allow.mount [presence]"
        assert "nginx" in lines
        assert "  host.hostname [set] 'nginx'" in lines

    def test_parse_stdin(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["parse", "-", "-f", "tree"], input="* { persist; }\n")

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["* (default)", "  persist [presence]"]

    def test_parse_error_exits_1(self, cli_runner: CliRunner, bad_conf: Path):
        result = cli_runner.invoke(app, ["parse", str(bad_conf)])

        assert result.exit_code == 1
        assert "UnterminatedString" in result.output

    def test_parse_unknown_format(self, cli_runner: CliRunner, ioc_test_jail_conf: Path):
        result = cli_runner.invoke(app, ["parse", str(ioc_test_jail_conf), "-f", "yaml"])
        assert result.exit_code == 2

    def test_parse_missing_file(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(app, ["parse", str(tmp_path / "missing.conf")])
        assert result.exit_code == 1

    def test_parse_non_utf8_file(self, cli_runner: CliRunner, tmp_path: Path):
        conf = tmp_path / "latin1.conf"
        conf.write_bytes(b'www { k = "\xff"; }\n')

        result = cli_runner.invoke(app, ["parse", str(conf)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Error:" in result.output

    def test_parse_with_config(self, cli_runner: CliRunner, full_conf: Path, tmp_path: Path):
        config = tmp_path / "jailconf.toml"
        config.write_text("[parser]\nglobal_parameters = false\n")

        result = cli_runner.invoke(app, ["parse", str(full_conf), "--config", str(config)])

        assert result.exit_code == 1
        assert "UnexpectedToken" in result.output

    def test_parse_with_bad_config(self, cli_runner: CliRunner, full_conf: Path, tmp_path: Path):
        config = tmp_path / "jailconf.toml"
        config.write_text("[parser]\nbogus = true\n")

        result = cli_runner.invoke(app, ["parse", str(full_conf), "--config", str(config)])

        assert result.exit_code == 1
        assert "Config error" in result.output


class TestValidateCommand:
    """Tests for `jailconf validate`."""

    def test_validate_ok(self, cli_runner: CliRunner, ioc_test_jail_conf: Path, nginx_conf: Path):
        result = cli_runner.invoke(app, ["validate", str(ioc_test_jail_conf), str(nginx_conf)])

        assert result.exit_code == 0, result.output
        assert result.stdout.count("OK:") == 2

    def test_validate_reports_each_failure(
        self, cli_runner: CliRunner, bad_conf: Path, nginx_conf: Path
    ):
        result = cli_runner.invoke(app, ["validate", str(bad_conf), str(nginx_conf)])

        assert result.exit_code == 1
        assert "parse error [UnterminatedString]" in result.output
        assert f"OK: {nginx_conf}" in result.output

    def test_validate_non_utf8_file_is_reported(
        self, cli_runner: CliRunner, tmp_path: Path, nginx_conf: Path
    ):
        conf = tmp_path / "latin1.conf"
        conf.write_bytes(b'www { k = "\xff"; }\n')

        result = cli_runner.invoke(app, ["validate", str(conf), str(nginx_conf)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert f"{conf}: error:" in result.output
        assert f"OK: {nginx_conf}" in result.output

    def test_validate_unknown_format(self, cli_runner: CliRunner, nginx_conf: Path):
        result = cli_runner.invoke(app, ["validate", str(nginx_conf), "--format", "xml"])

        assert result.exit_code == 2
        assert "Unknown format" in result.output

    def test_validate_vscode_format(
        self, cli_runner: CliRunner, bad_conf: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.chdir(bad_conf.parent)
        result = cli_runner.invoke(app, ["validate", str(bad_conf), "--format", "vscode"])

        assert result.exit_code == 1
        assert "bad.conf:2:16: error: Unterminated string literal" in result.output


class TestVersion:
    """Tests for --version."""

    def test_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.startswith("jailconf ")

    def test_version_matches_package(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.stdout.splitlines()[0] == f"jailconf {jailconf.__version__}"
        assert jailconf.__version__ != "0.0.0"
