"""CLI tests."""

from click.testing import CliRunner

from pcbuilds.cli.main import cli


def test_gen_secret():
    result = CliRunner().invoke(cli, ["gen-secret"])
    assert result.exit_code == 0
    assert len(result.output.strip()) >= 40


def test_help_lists_commands():
    result = CliRunner().invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("serve", "init-db", "gen-secret"):
        assert command in result.output
