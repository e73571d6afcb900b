"""Tests for the CLI module."""

from __future__ import annotations

from unittest.mock import patch

from click.testing import CliRunner

from commit_clock.cli import main

NO_ENV = {"GH_TOKEN": "", "GITHUB_TOKEN": "", "GIST_ID": "", "TIMEZONE": ""}


def _runner() -> CliRunner:
    return CliRunner(env=NO_ENV)


@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_success(mock_asyncio_run):
    result = _runner().invoke(main, ["--token", "fake-token", "--gist-id", "abc"])
    assert result.exit_code == 0
    mock_asyncio_run.assert_called_once()


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_builds_settings(mock_asyncio_run, mock_run):
    result = _runner().invoke(main, [
        "--token", "fake-token", "--gist-id", "abc", "--timezone", "Asia/Seoul",
    ])
    assert result.exit_code == 0
    settings = mock_run.call_args.args[0]
    assert settings.token == "fake-token"
    assert settings.gist_id == "abc"
    assert settings.timezone == "Asia/Seoul"
    assert mock_run.call_args.kwargs["dry_run"] is False


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_reads_environment(mock_asyncio_run, mock_run):
    runner = CliRunner(env={"GH_TOKEN": "env-token", "GIST_ID": "env-gist", "TIMEZONE": "UTC"})
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    settings = mock_run.call_args.args[0]
    assert settings.token == "env-token"
    assert settings.gist_id == "env-gist"
    assert settings.timezone == "UTC"


@patch("commit_clock.cli.asyncio.run", return_value=1)
def test_main_propagates_failure_status(mock_asyncio_run):
    result = _runner().invoke(main, ["--token", "fake-token", "--gist-id", "abc"])
    assert result.exit_code == 1


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_dry_run_without_gist(mock_asyncio_run, mock_run):
    result = _runner().invoke(main, [
        "--token", "fake-token", "--dry-run", "--format", "json", "--output", "/tmp/out.json",
    ])
    assert result.exit_code == 0
    kwargs = mock_run.call_args.kwargs
    assert kwargs["dry_run"] is True
    assert kwargs["output_format"] == "json"
    assert kwargs["output_file"] == "/tmp/out.json"


def test_main_missing_token():
    result = _runner().invoke(main, ["--gist-id", "abc"])
    assert result.exit_code != 0


def test_main_missing_gist_id():
    result = _runner().invoke(main, ["--token", "fake-token"])
    assert result.exit_code != 0
    assert "gist" in result.output.lower()


def test_main_invalid_timezone():
    result = _runner().invoke(main, [
        "--token", "fake-token", "--gist-id", "abc", "--timezone", "Mars/Olympus",
    ])
    assert result.exit_code != 0
    assert "Mars/Olympus" in result.output


def test_main_version():
    result = _runner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower() or "." in result.output


UNSET_ENV = {key: None for key in NO_ENV}


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_reads_dotenv_file(mock_asyncio_run, mock_run):
    runner = CliRunner(env=UNSET_ENV)
    with runner.isolated_filesystem():
        with open(".env", "w", encoding="utf-8") as f:
            f.write("GH_TOKEN=file-token\nGIST_ID=file-gist\nTIMEZONE=Asia/Seoul\n")
        result = runner.invoke(main, [])
    assert result.exit_code == 0, result.output
    settings = mock_run.call_args.args[0]
    assert settings.token == "file-token"
    assert settings.gist_id == "file-gist"
    assert settings.timezone == "Asia/Seoul"


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_explicit_env_file(mock_asyncio_run, mock_run):
    runner = CliRunner(env=UNSET_ENV)
    with runner.isolated_filesystem():
        with open("prod.env", "w", encoding="utf-8") as f:
            f.write("GH_TOKEN=prod-token\nGIST_ID=prod-gist\n")
        result = runner.invoke(main, ["--env-file", "prod.env"])
    assert result.exit_code == 0, result.output
    assert mock_run.call_args.args[0].token == "prod-token"


@patch("commit_clock.cli.run")
@patch("commit_clock.cli.asyncio.run", return_value=0)
def test_main_environment_wins_over_dotenv(mock_asyncio_run, mock_run):
    runner = CliRunner(env={**UNSET_ENV, "GH_TOKEN": "env-token"})
    with runner.isolated_filesystem():
        with open(".env", "w", encoding="utf-8") as f:
            f.write("GH_TOKEN=file-token\nGIST_ID=file-gist\n")
        result = runner.invoke(main, [])
    assert result.exit_code == 0, result.output
    settings = mock_run.call_args.args[0]
    assert settings.token == "env-token"
    assert settings.gist_id == "file-gist"
