"""
tests/test_seed_cli.py — Click entrypoint for the seed routine.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from swc_seed.cli import main


def test_run_prints_progress(database_url):
    runner = CliRunner()
    result = runner.invoke(main, ["run"])

    assert result.exit_code == 0, result.output
    assert "Starting seed..." in result.output
    assert "  Created 4 techniques" in result.output
    assert "  Created 2 boq items" in result.output
    assert result.output.rstrip().endswith("Seeding completed successfully!")


def test_run_twice_succeeds(database_url):
    runner = CliRunner()
    assert runner.invoke(main, ["run"]).exit_code == 0
    assert runner.invoke(main, ["run"]).exit_code == 0


def test_status_after_run(database_url):
    runner = CliRunner()
    runner.invoke(main, ["run"])
    result = runner.invoke(main, ["status"])

    assert result.exit_code == 0
    assert "Row counts:" in result.output
    assert "maintenance_templates" in result.output


def test_run_failure_exits_with_status_1(database_url):
    runner = CliRunner()
    with patch("swc_seed.seeder.run", new=AsyncMock(side_effect=RuntimeError("db down"))):
        result = runner.invoke(main, ["run"])

    assert result.exit_code == 1
    assert "Seeding completed successfully!" not in result.output


def test_status_without_schema_exits_with_status_1(database_url):
    result = CliRunner().invoke(main, ["status"])
    assert result.exit_code == 1
