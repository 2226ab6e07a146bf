"""Tests for the CLI entry point."""

import json
import os
import tempfile

import pytest
from click.testing import CliRunner

from cloudboard.cli import main


FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "..", "fixtures")


class TestClassifyCommand:
    def test_known_and_unknown_tokens(self):
        runner = CliRunner()
        result = runner.invoke(main, ["classify", "healthy", "processing", "bogus"])
        assert result.exit_code == 0
        assert "healthy -> ok" in result.output
        assert "processing -> inProgress" in result.output
        assert "bogus -> critical" in result.output

    def test_requires_a_token(self):
        runner = CliRunner()
        result = runner.invoke(main, ["classify"])
        assert result.exit_code != 0


class TestInsightsCommand:
    def test_lists_in_order(self):
        runner = CliRunner()
        result = runner.invoke(main, ["insights"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("[optimization]")
        assert lines[3].startswith("[cost]")


class TestSnapshotCommand:
    def test_default_catalog(self):
        runner = CliRunner()
        result = runner.invoke(main, ["snapshot"])
        assert result.exit_code == 0
        assert "System Uptime: 99.94% (Last 30 days)" in result.output
        assert "API Requests: 2,847,392 (Today)" in result.output
        assert "Production (us-east-1)" in result.output
        assert "Security Recommendation" in result.output

    def test_with_config(self):
        profile = os.path.join(FIXTURES_DIR, "dashboard.yaml")
        runner = CliRunner()
        result = runner.invoke(main, ["snapshot", "--config", profile])
        assert result.exit_code == 0
        assert "Overall health: critical" in result.output
        assert "[critical] Deploy: Rolling back" in result.output

    def test_invalid_config_exits_with_error(self):
        with tempfile.NamedTemporaryFile(suffix=".json", mode="w", delete=False) as f:
            json.dump({"tick_interval_ms": -1}, f)
        try:
            runner = CliRunner()
            result = runner.invoke(main, ["snapshot", "--config", f.name])
            assert result.exit_code == 1
        finally:
            os.unlink(f.name)


class TestWatchCommand:
    def test_stops_after_ticks(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["watch", "--ticks", "2", "--interval-ms", "10", "--seed", "3"]
        )
        assert result.exit_code == 0
        assert "Stopped after 2 tick(s)" in result.output
        # initial render plus one per tick
        assert result.output.count("System Uptime:") == 3

    def test_uses_config_interval_and_seed(self):
        with tempfile.NamedTemporaryFile(suffix=".json", mode="w", delete=False) as f:
            json.dump({"tick_interval_ms": 10, "seed": 5}, f)
        try:
            runner = CliRunner()
            result = runner.invoke(main, ["watch", "--config", f.name, "--ticks", "1"])
            assert result.exit_code == 0
            assert "Stopped after 1 tick(s)" in result.output
        finally:
            os.unlink(f.name)

    def test_rejects_zero_interval(self):
        runner = CliRunner()
        result = runner.invoke(main, ["watch", "--ticks", "1", "--interval-ms", "0"])
        assert result.exit_code != 0

    @pytest.mark.parametrize("interval", ["inf", "nan"])
    def test_rejects_non_finite_interval(self, interval):
        runner = CliRunner()
        result = runner.invoke(main, ["watch", "--ticks", "1", "--interval-ms", interval])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_seed_overview_printed_before_ticks(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["watch", "--ticks", "1", "--interval-ms", "1", "--seed", "3"]
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "System Uptime: 99.94% (Last 30 days)"
        assert lines[1] == "API Requests: 2,847,392 (Today)"


class TestArchitectureCommand:
    def test_prints_layers_and_flow(self):
        runner = CliRunner()
        result = runner.invoke(main, ["architecture"])
        assert result.exit_code == 0
        assert "  Presentation Layer:" in result.output
        assert "Oracle Database: Master-slave clustering" in result.output
        assert "Data Flow: Users -> WAF -> API Gateway -> Services -> Data" in result.output

    def test_snapshot_includes_architecture_and_properties(self):
        runner = CliRunner()
        result = runner.invoke(main, ["snapshot"])
        assert result.exit_code == 0
        assert "Architecture:" in result.output
        assert "Compute: Auto-scaling enabled" in result.output
        assert "Network: VPC with security groups" in result.output
