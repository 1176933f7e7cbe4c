"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

import main as cli
from agents import CLAIMS_SYSTEM_TRANSCRIPT
from exceptions import ConfigurationError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_settings(test_settings, monkeypatch):
    monkeypatch.setattr(cli, "settings", test_settings)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return test_settings


class TestCli:

    def test_show_prompt_with_sample(self, runner):
        result = runner.invoke(cli.main, ["--sample", "--show-prompt"])
        assert result.exit_code == 0
        assert CLAIMS_SYSTEM_TRANSCRIPT.strip() in result.output
        assert "Strategic Requirements:" in result.output

    def test_list_providers(self, runner):
        result = runner.invoke(cli.main, ["--list-providers"])
        assert result.exit_code == 0
        assert "gemini" in result.output
        assert "anthropic" in result.output

    def test_no_input_exits_with_error(self, runner):
        result = runner.invoke(cli.main, [])
        assert result.exit_code == 1

    def test_blank_input_makes_no_call(self, runner):
        with patch.object(cli, "get_provider") as get_provider:
            result = runner.invoke(cli.main, ["--input", "   "])
        assert result.exit_code == 1
        get_provider.assert_not_called()

    def test_missing_key_exits_with_error(self, runner):
        with patch.object(cli, "get_provider", side_effect=ConfigurationError("no key")):
            result = runner.invoke(cli.main, ["--sample", "--provider", "anthropic"])
        assert result.exit_code == 1

    def test_markdown_output(self, runner, make_provider, strategy_json):
        provider = make_provider([strategy_json])
        with patch.object(cli, "get_provider", return_value=provider):
            result = runner.invoke(cli.main, ["--sample", "--format", "markdown"])
        assert result.exit_code == 0, result.output
        assert "# Cloud Modernization Strategy" in result.output
        assert "Confidence **83%**" in result.output
        assert CLAIMS_SYSTEM_TRANSCRIPT in provider.calls[0]["prompt"]

    def test_json_output(self, runner, make_provider, strategy_json):
        with patch.object(cli, "get_provider", return_value=make_provider([strategy_json])):
            result = runner.invoke(cli.main, ["--input", "CTO: we are all on-prem.", "--format", "json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["recommended_pilot"]["name"] == "Fraud scoring on new auto claims"

    def test_input_from_file(self, runner, make_provider, strategy_json, tmp_path):
        transcript = tmp_path / "call.txt"
        transcript.write_text("CFO: OpEx must stay under $20k a month.", encoding="utf-8")
        provider = make_provider([strategy_json])
        with patch.object(cli, "get_provider", return_value=provider):
            result = runner.invoke(cli.main, ["--input", str(transcript), "--format", "markdown"])
        assert result.exit_code == 0, result.output
        assert "CFO: OpEx must stay under $20k a month." in provider.calls[0]["prompt"]

    def test_failed_analysis_exits_with_error(self, runner, make_provider):
        with patch.object(cli, "get_provider", return_value=make_provider(["{}"])):
            result = runner.invoke(cli.main, ["--sample", "--format", "markdown"])
        assert result.exit_code == 1
        assert "Ready for Analysis" in result.output


class TestReadInputContent:

    def test_literal_text(self):
        assert cli.read_input_content("CTO: hello") == "CTO: hello"

    def test_file(self, tmp_path):
        path = tmp_path / "t.txt"
        path.write_text("from file", encoding="utf-8")
        assert cli.read_input_content(str(path)) == "from file"
