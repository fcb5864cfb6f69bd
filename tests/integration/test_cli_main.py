#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from mailtxn.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Bank Alert Transaction Extraction" in result.output

        for command in ["version", "config", "extract", "query", "fetch"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "mailtxn v0.1.0" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Data Directory:" in result.output
        assert "Output Directory:" in result.output
        assert "Access Token: not set" in result.output
        assert "Query Sender: alerts@hdfcbank.net" in result.output
        assert "Log Level: INFO" in result.output

    def test_config_command_redacts_tokens(self, monkeypatch):
        monkeypatch.setenv("GMAIL_ACCESS_TOKEN", "super-secret-token")

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "super-secret-token" not in result.output
        assert "Access Token: ***REDACTED***" in result.output

    def test_invalid_configuration_is_reported(self, monkeypatch):
        monkeypatch.setenv("GMAIL_REFRESH_TOKEN", "refresh-me")

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code != 0
        assert "Configuration validation failed" in result.output

    def test_production_without_token_fails(self):
        result = self.runner.invoke(main, ["--config-env", "production", "config"])

        assert result.exit_code != 0
        assert "GMAIL_ACCESS_TOKEN is required in production" in result.output

    def test_verbose_flag_shows_environment(self):
        result = self.runner.invoke(main, ["--verbose", "version"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["nonexistent"])

        assert result.exit_code != 0
        assert "No such command" in result.output
