"""Unit tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from sludge.cli import app, build_store
from sludge.models import ParamGroup


@pytest.fixture
def cli_runner():
    return CliRunner()


class TestBuildStore:
    """Tests for applying CLI options to the parameter store."""

    def test_no_edits_gives_defaults(self, snapshot):
        assert build_store({}).snapshot == snapshot

    def test_ts_sludge_derives_vs_sludge(self):
        store = build_store({"ts_sludge": 2.0})

        assert store.snapshot.mixture.vs_sludge == 1.5

    def test_explicit_vs_sludge_wins(self):
        store = build_store({"ts_sludge": 2.0, "vs_sludge": 1.8})

        assert store.snapshot.mixture.vs_sludge == 1.8

    def test_target_biomass(self):
        store = build_store({}, target_biomass=8000)

        assert store.snapshot.target_biomass == 8000.0
        assert store.snapshot.group(ParamGroup.BIOMASS).fcr == 1.1


class TestCommands:
    """Tests for the biomass, land and sweep commands."""

    def test_biomass(self, cli_runner):
        result = cli_runner.invoke(app, ["biomass"])

        assert result.exit_code == 0
        assert "Sustainable biomass" in result.output
        assert "3,470 kg/ha/yr" in result.output

    def test_biomass_with_edits(self, cli_runner):
        result = cli_runner.invoke(app, ["biomass", "--max-n", "340"])

        assert result.exit_code == 0
        assert "6,940 kg/ha/yr" in result.output

    def test_land(self, cli_runner):
        result = cli_runner.invoke(app, ["land"])

        assert result.exit_code == 0
        assert "1.44 ha" in result.output

    def test_land_target_biomass(self, cli_runner):
        result = cli_runner.invoke(app, ["land", "-b", "10000"])

        assert result.exit_code == 0
        assert "2.88 ha" in result.output

    def test_land_writes_csv(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["land", "--output-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert (tmp_path / "land_results.csv").exists()
        assert (tmp_path / "land_sensitivity_target_biomass.csv").exists()
        assert "Wrote" in result.output

    def test_sweep_default_range(self, cli_runner):
        result = cli_runner.invoke(app, ["sweep", "fcr"])

        lines = result.output.strip().splitlines()
        assert result.exit_code == 0
        assert lines[0] == "fcr\tkg/ha/yr"
        assert len(lines) == 11
        assert lines[7] == "1.10\t3470"

    def test_sweep_land_mode(self, cli_runner):
        result = cli_runner.invoke(
            app,
            [
                "sweep",
                "target_biomass",
                "--mode",
                "land",
                "--start",
                "5000",
                "--stop",
                "10000",
                "--step",
                "5000",
            ],
        )

        assert result.exit_code == 0
        assert result.output.strip().splitlines() == [
            "target_biomass\tha",
            "5000\t1.44",
            "10000\t2.88",
        ]

    def test_sweep_target_biomass_in_biomass_mode(self, cli_runner):
        result = cli_runner.invoke(app, ["sweep", "target_biomass"])

        assert result.exit_code == 2

    def test_sweep_invalid_range(self, cli_runner):
        result = cli_runner.invoke(app, ["sweep", "r_ratio", "--start", "10", "--stop", "1"])

        assert result.exit_code == 2
