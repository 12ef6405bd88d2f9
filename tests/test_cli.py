import json
import pathlib

import pytest
from click.testing import CliRunner

from ledgerdecimal import __version__
from ledgerdecimal.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    path = tmp_path / "ledgerdecimal" / "config.toml"
    monkeypatch.setattr("ledgerdecimal.cli.config.CONFIG_FILE", path)
    return path


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_parse(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1.5", "--decimals", "6"])
    assert result.exit_code == 0
    assert result.output == "1500000\n"


def test_cli_parse_truncates(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1.1234567", "--decimals", "6"])
    assert result.exit_code == 0
    assert result.output == "1123456\n"


def test_cli_parse_negative(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "--decimals", "6", "--", "-1.5"])
    assert result.exit_code == 0
    assert result.output == "-1500000\n"


def test_cli_parse_default_decimals(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1"])
    assert result.exit_code == 0
    assert result.output == f"{10**18}\n"


def test_cli_parse_invalid_value(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "abc"])
    assert result.exit_code == 2
    assert "Invalid decimal operand" in result.output


def test_cli_parse_negative_decimals(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1", "--decimals", "-1"])
    assert result.exit_code == 2


def test_cli_format(runner: CliRunner):
    result = runner.invoke(cli, ["format", "1500000", "--decimals", "6"])
    assert result.exit_code == 0
    assert result.output == "1.5\n"

    result = runner.invoke(cli, ["format", "1"])
    assert result.exit_code == 0
    assert result.output == "0.000000000000000001\n"


def test_cli_format_invalid_integer(runner: CliRunner):
    result = runner.invoke(cli, ["format", "1.5"])
    assert result.exit_code == 2


def test_cli_config_show_default(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show"])
    assert result.exit_code == 0
    assert "max_number_digits" in result.output


def test_cli_config_show_json(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--json"])
    assert result.exit_code == 0
    assert set(json.loads(result.output)) == {"default_decimals", "max_number_digits"}


def test_cli_config_show_toml(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--toml"])
    assert result.exit_code == 0
    assert "default_decimals = " in result.output


def test_cli_config_init(runner: CliRunner, config_file: pathlib.Path):
    result = runner.invoke(cli, ["config", "init"])
    assert result.exit_code == 0
    assert config_file.exists()
    assert "max_number_digits" in config_file.read_text()

    result = runner.invoke(cli, ["config", "init"])
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = runner.invoke(cli, ["config", "init", "--force"])
    assert result.exit_code == 0
